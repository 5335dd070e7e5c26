# sponge

TCP sequence numbers are 32 bits wide. They start at a random initial
sequence number (ISN) and wrap around. Inside a TCP implementation it is far
easier to work with zero-based 64-bit "absolute" sequence numbers. This
package converts between the two.

## Install

```
pip install .
```

## Usage

```python
from sponge.wrapping_integers import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)

# Absolute sequence number -> 32-bit wire sequence number
seqno = wrap(3 * 2**32 + 17, isn)
print(seqno)                 # 32

# Wire sequence number -> the absolute sequence number closest to a checkpoint
print(unwrap(WrappingInt32(2**32 - 1), WrappingInt32(10), 3 * 2**32))  # 12884901877
```

### `wrap(n, isn)`

Adds the ISN to the absolute sequence number `n` and keeps the low 32 bits.
The result is a `WrappingInt32`.

### `unwrap(n, isn, checkpoint)`

Returns the absolute sequence number that wraps to `n` and lies closest to
`checkpoint`. The checkpoint is usually the most recently seen absolute
sequence number. The result never falls below 0 and never goes past
2**64 - 1. A `checkpoint` outside the range 0 to 2**64 - 1 raises
`ValueError`.

### `WrappingInt32`

`WrappingInt32` is a frozen dataclass that holds one field, `raw_value`. A raw
value outside the range 0 to 2**32 - 1 raises `ValueError`.
`WrappingInt32.mask` is `0xFFFFFFFF`.

Arithmetic on it wraps modulo 2**32:

- `seqno + k` steps `k` forward and `seqno - k` steps `k` back, where `k` is
  an `int`. Both return a `WrappingInt32`.
- `a - b` between two `WrappingInt32` values returns their signed 32-bit
  offset as an `int`. The result is negative when stepping backwards from `b`
  to `a` takes no more steps than stepping forwards.
- `==` compares raw values. Values are hashable.
- `int()` and `str()` give the raw value, `str()` in decimal.

## What this package does not do

The package offers only sequence-number arithmetic. It has no TCP sender,
receiver or connection, no segment parsing or serialisation, and it does no
network I/O.

## Tests

```
pip install .[test]
pytest
```