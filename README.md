# mpbar

Building blocks for progress bars in a terminal: decorators that describe
a bar's state as text, human-readable size and percentage formatting,
column-width synchronisation between decorators, moving averages for
speed and ETA estimates, and reader/writer proxies that advance a bar as
data flows through them.

## Installation

```
pip install mpbar
```

## Decorators

A decorator turns a `Statistics` snapshot (`total`, `current`,
`completed`, `aborted`, …) into a string and its visual width. Width and
alignment come from a `WC` value: `w` is the minimum width, `c` a set of
flags (`DINDENT_RIGHT`, `DEXTRA_SPACE`, `DSYNC_WIDTH` and their
combinations) from `mpbar.decor.decorator`.

```python
from mpbar.decor.decorator import DINDENT_RIGHT, WC, Statistics
from mpbar.decor.basic import name, new_percentage

text, width = name("Test", WC(w=10)).decor(Statistics())
# text == "      Test", width == 10

text, _ = name("Test", WC(w=10, c=DINDENT_RIGHT)).decor(Statistics())
# text == "Test      "

text, _ = new_percentage("%.2f").decor(Statistics(total=99, current=11))
# text == "11.11%"
```

Available decorators:

- `mpbar.decor.basic`: `name`, `spinner`, `percentage`, `new_percentage`.
- `mpbar.decor.counters`: `counters`, `total`, `current` and
  `inverted_current`, each with `_no_unit`, `_kibibyte` and `_kilobyte`
  variants.
- `mpbar.decor.timing`: `elapsed`, `new_elapsed`, `average_eta`,
  `new_average_eta`, `ewma_eta`, `ewma_normalized_eta`,
  `moving_average_eta`, plus `max_tolerate_time_normalizer` and
  `fixed_interval_time_normalizer`. Durations render in one of the
  `TimeStyle` values `GO`, `HHMMSS`, `HHMM` or `MMSS`.
- `mpbar.decor.speed`: `average_speed`, `new_average_speed`,
  `ewma_speed`, `moving_average_speed`.
- `mpbar.decor.decorator`: `func_decorator` turns any function of
  `Statistics` into a decorator.

Wrappers in `mpbar.decor.wrappers` change what a decorator shows on
events: `on_complete`, `on_abort`, `on_complete_or_on_abort`, `meta`,
`on_complete_meta`, `on_abort_meta`, `on_complete_meta_or_on_abort_meta`,
and the selectors `conditional`, `predicative`, `on_condition`,
`on_predicate`.

```python
from mpbar.decor.decorator import Statistics, TimeStyle
from mpbar.decor.timing import average_eta
from mpbar.decor.wrappers import on_complete

eta = on_complete(average_eta(TimeStyle.GO), "done")
text, _ = eta.decor(Statistics(total=100, current=100, completed=True))
# text == "done"
```

## Size and percentage formatting

`sprintf` in `mpbar.decor.formatting` understands printf-style verbs and
lets `SizeB1024`, `SizeB1000`, `PercentageValue` and speed values format
themselves. A space flag puts a space before the unit.

```python
from mpbar.decor.formatting import SizeB1000, SizeB1024, fmt_as_speed, sprintf

sprintf("%d", SizeB1024(12345678))               # "12MiB"
sprintf("% .1f", SizeB1000(12345678))            # "12.3 MB"
sprintf("%.1f", fmt_as_speed(SizeB1024(2048)))   # "2.0KiB/s"
```

`mpbar.calc` holds `percentage`, `percentage_round` and
`check_requested_width`.

## Width synchronisation

Decorators created with the `DSYNC_WIDTH` flag (for example with
`WC_SYNC_WIDTH`) block in `decor` until every decorator in their column
has offered its width, then all pad to the widest. Collect each
decorator's channel with `sync()` and hand the columns to
`mpbar.sync.sync_width`, which starts one distributor thread per column;
an optional `threading.Event` abandons the exchange when set.

```python
from mpbar.decor.basic import percentage
from mpbar.decor.decorator import WC_SYNC_WIDTH
from mpbar.sync import sync_width

a, b = percentage(WC_SYNC_WIDTH), percentage(WC_SYNC_WIDTH)
sync_width({0: [a.sync()[0], b.sync()[0]]})
# now call a.decor(...) and b.decor(...) from separate threads
```

## Moving averages

`mpbar.decor.moving_average` provides `SimpleEWMA`, `VariableEWMA`
(custom age with a ten-sample warm-up), `MedianWindow` (median of the
last three samples) and `ThreadSafeMovingAverage`, with the factories
`new_moving_average`, `new_median` and `new_thread_safe_moving_average`.
The EWMA ETA and speed decorators are fed through
`ewma_update(n, duration)` with a `datetime.timedelta`.

## Priority queue

`mpbar.priority_queue.PriorityQueue` is a max-heap on each item's
`priority` attribute that keeps each item's `index` attribute current,
with `push`, `pop`, `fix`, `len()` and iteration.

## I/O proxies

`mpbar.proxy.new_proxy_reader` and `new_proxy_writer` wrap a file-like
object so that every byte read or written is reported to a bar object:
its `incr_by(n)` method is called, or `ewma_incr_by(n, duration)` when
`has_ewma` is true. Both proxies are context managers and close the
wrapped object on exit.

## What this package does not do

There is no progress container or bar object here and nothing that draws
to the terminal: the package does not manage a set of running bars,
refresh the screen or move the cursor. The proxies and `PriorityQueue`
work with any object that offers the attributes and methods described
above.

## Running the tests

```
pip install "mpbar[test]"
pytest
```