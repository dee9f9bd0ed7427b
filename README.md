# firmkit

Building blocks in the style of small microcontroller firmware, written as
plain Python with no runtime dependencies (Python 3.10 or later).

## Modules

- `firmkit.bits` – helpers on 8-bit values: `to_binary`, `shift_right`,
  `shift_left`, `set_mask`, `clear_mask`, `toggle_mask`, `set_bit`,
  `clear_bit`, `toggle_bit`, `get_bit`. Shifts and bit numbers of 8 or more
  leave the byte unchanged.
- `firmkit.ringbuffer` – `RingBuffer(capacity)`, a fixed-capacity byte ring
  buffer. `write` returns `False` and drops the byte when the buffer is full;
  `read` raises `IndexError` when it is empty; `clear` and `len()` are
  supported.
- `firmkit.queue` – `Queue(elements, size)`, a bounded FIFO of records of
  exactly `size` bytes. `write` and `read` raise `QueueError` on a full or
  empty queue; `is_empty`, `is_full`, `flush` and `len()` are supported. The
  `write_isr`, `read_isr`, `is_empty_isr` and `flush_isr` variants take an
  interrupt number (0–30, or `DISABLE_ALL_INTERRUPTS` = `0xFF`), reject any
  other with `ValueError`, and run the operation under a lock.
- `firmkit.arrays` – `average` (with an 8-bit wrapping sum), `copy_array`,
  `arrays_differ`, `largest`, `sort_values`, `time_string` (`HH:MM:SS`) and
  `date_string` (`Mon DD, YYYY Wd`, weekday 0 = Monday).
- `firmkit.packing` – `unpack_bytes` (32-bit word, byte and 16-bit half-word
  to 7 little-endian bytes), `pack_bytes` (11-byte message to a
  `PackedMessage`), `format_reversed_hex`, and `Customer` with
  `customer_report`.
- `firmkit.scheduler` – `Task`, `Scheduler` and `milliseconds`. A
  `Scheduler(tick, capacity, timeout=None, clock=None)` registers tasks with
  `register_task(init, task, period)`, which returns a 1-based id used by
  `stop_task`, `start_task` and `set_period`. `step` advances one tick and
  returns the ids that ran; `run(ticks=None)` calls the init functions, then
  steps once per tick until the tick count or the timeout is reached.
- `firmkit.doorlock` – `DoorLock(codes)`, doors opened in order by digit
  codes (a wrong digit restarts the current code), and `run(digits, out)`,
  which plays the two-door dialogue with the default codes.
- `firmkit.gears` – the `Gear` enum (`DRIVE`, `NEUTRAL`, `REVERSE`) and
  `GearSelector`, which moves to the next gear when `press` gets the key
  shown by `prompt`.
- `firmkit.algorithms` – `salary_histogram`, `unique_in_range`, `is_prime`,
  `primes_below` and `dice_histogram(rolls=3600, rng=None)`.
- `firmkit.basics` – `arithmetic`, `compare`, `three_stats`, `circle`,
  `min_max`, `parity`, `is_multiple`, `five_digits`, `squares_and_cubes`,
  `checkerboard`.
- `firmkit.flow` – `miles_per_gallon`, `new_balance`, `credit_exceeded`,
  `salary`, `interest_charge`, `multiples_table`, `is_palindrome`,
  `binary_to_decimal`, `count_sevens`, `square_pattern`.

## Installation

```
pip install .
```

## Examples

```python
from firmkit.bits import set_bit, to_binary
from firmkit.arrays import time_string, date_string
from firmkit.ringbuffer import RingBuffer
from firmkit.queue import Queue

print(to_binary(set_bit(0b00000011, 3)))   # 00001011
print(time_string(23, 30, 0))              # 23:30:00
print(date_string(12, 16, 2001, 5))        # Dec 16, 2001 Sa

ring = RingBuffer(18)
ring.write(0x0A)
print(len(ring), ring.read())              # 1 10

queue = Queue(elements=4, size=2)
queue.write(b"\x01\x02")
print(queue.read())                        # b'\x01\x02'
```

## Commands

```
firmkit-bits          # walk through the bit helpers
firmkit-ringbuffer    # fill an 18-byte ring buffer twice and drain it
firmkit-arrays        # walk through the array and string routines
firmkit-packing       # customer report and packing examples
firmkit-scheduler     # three counting tasks, one stopped, for 6 seconds
firmkit-doorlock      # two-door keypad; digits read from standard input
firmkit-gears         # gear selector; keys read from standard input
firmkit-algorithms [dice|primes|salary|unique]
firmkit-basics [arithmetic|count|compare|stats|circle|shapes|steps|minmax|parity|letters|multiple|checkerboard|digits|table]
firmkit-flow [mpg|balance|credit|salary|interest|decrement|count|table|palindrome|binary|sevens|grid|square]
```

The interactive exercises read whitespace-separated values from standard
input.

## What it does not do

Nothing here talks to hardware. The queue's `*_isr` methods take a lock
instead of masking real interrupts, and the scheduler runs on the host clock
(or a clock you pass in).

## Tests

```
pip install ".[test]"
pytest
```