# plotlars

plotlars turns pandas data frames into Plotly figure specifications. You
describe a chart by naming columns and choosing styling components. plotlars
then builds the traces and the layout as plain Python data. It can return them
as a dictionary or as JSON, or write them into an HTML page that draws them with
plotly.js.

## Installation

```
pip install plotlars
```

The only runtime dependency is pandas. plotly.js is not bundled.

## A bar plot

```python
import pandas as pd

from plotlars.barplot import BarPlot
from plotlars.color import Rgb
from plotlars.enums import Orientation
from plotlars.legend import Legend
from plotlars.text import Text

dataset = pd.DataFrame({
    "animal": ["giraffe", "giraffe", "orangutan", "orangutan", "monkey", "monkey"],
    "gender": ["female", "male", "female", "male", "female", "male"],
    "value": [20.0, 25.0, 14.0, 18.0, 23.0, 31.0],
    "error": [1.0, 0.5, 1.5, 1.0, 0.5, 1.5],
})

plot = BarPlot(
    dataset,
    "animal",
    "value",
    orientation=Orientation.VERTICAL,
    group="gender",
    error="error",
    colors=[Rgb(255, 127, 80), Rgb(64, 224, 208)],
    plot_title=Text("Bar Plot", font="Arial", size=18),
    x_title="animal",
    y_title="value",
    legend_title="gender",
    legend=Legend(orientation=Orientation.HORIZONTAL, x=0.4, y=1.0),
)

plot.write_html("barplot.html")
```

When `group` is given, each distinct value of that column gets its own trace.
Traces appear in the order in which their values first occur in the data. The
trace at position *i* is coloured with `colors[i]`. A single `color` overrides
`colors`. Without a group there is one trace. The `error` column becomes
`error_y` on vertical bars and `error_x` on horizontal ones. It must not hold
missing values. The layout always sets `barmode` to `"group"`.

Titles accept either a `Text` or a plain string. `x_title` and `y_title` only
take effect when the matching `x_axis` or `y_axis` is also given.

## A 2D array as an image

```python
from plotlars.array2dplot import Array2dPlot

pixels = [
    [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
    [[0, 0, 255], [255, 0, 0], [0, 255, 0]],
    [[0, 255, 0], [0, 0, 255], [255, 0, 0]],
]

Array2dPlot(pixels, plot_title="Array 2D Plot").write_html("array.html")
```

Each pixel must have exactly three channels, and each channel must lie within
0..255. Anything else raises `ValueError` or `TypeError`.

## Output

Every plot is a `plotlars.plot.Plot` and offers the following:

- `to_dict()` returns a copy of the figure as `{"traces": [...], "layout": {...}}`.
- `to_json()` returns the same figure as a JSON string.
- `to_inline_html(plot_div_id=None)` returns a `<div>` and a script that calls
  `Plotly.newPlot`. Without an id, a random one is used. The page that embeds
  the fragment must load plotly.js itself.
- `to_html()` returns a complete HTML page. The page loads plotly.js from
  `Plot.plotly_js`, which defaults to `plotly.min.js`. Set that attribute to
  point at your own copy.
- `write_html(path)` writes the page from `to_html()` to a file.

## Styling components

Each of these is an immutable dataclass or an enum. Options left as `None` are
omitted from the output.

- `Axis`, `AxisSide`, `AxisType` in `plotlars.axis` control ticks, grid, lines,
  range, side and scale type.
- `Legend` in `plotlars.legend` controls position, border, font and
  orientation. `build_legend(title, legend)` returns the legend object.
- `ColorBar` in `plotlars.colorbar` styles the colour bar. Its `length` and
  `width` are in pixels.
- `Lighting` in `plotlars.lighting` describes surface lighting.
  `build_lighting(lighting)` returns the lighting object.
- `Rgb` is in `plotlars.color`, `Text` is in `plotlars.text`, and the marker
  symbol `Shape` is in `plotlars.shape`.
- `Orientation`, `Line`, `ValueExponent`, `TickDirection`, `Coloring`,
  `Arrangement` and `Palette` are in `plotlars.enums`.

The lower-level building blocks are also available:

- `plotlars.layout.create_layout`
- `plotlars.styling.create_line` and `plotlars.styling.create_marker`
- the data-frame column helpers in `plotlars.frame`: `unique_groups`,
  `filter_by_group`, `numeric_column` and `string_column`

## What plotlars does not do

- The only plots are `BarPlot` and `Array2dPlot`. `ColorBar`, `Lighting`,
  `Shape`, `Line` and the contour and Sankey enums are provided as components.
  No plot type in this package uses them yet.
- plotlars does not open a browser, show figures in a notebook, or export
  static images such as PNG or SVG. It produces figure data and HTML only.

## Running the tests

```
pip install -e ".[test]"
pytest
```