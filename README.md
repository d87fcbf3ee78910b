# hbsdata

The data layer of a Handlebars-style template engine, in plain Python with no
dependencies.

## Modules

- `hbsdata.jsonvalue`: `render_json` turns a JSON value into output text
  (`null` renders as nothing, arrays as `[1, 2, 3]`, objects as `[object]`);
  `is_truthy` decides whether a value counts as true in a condition, with an
  `include_zero` switch; `to_json` converts Python data (dicts, lists, tuples,
  dataclasses, enums) to plain JSON values; `ScopedJson` and `PathAndJson` hold a
  value together with where it came from (a template constant, a derived value,
  a place in the context data, or missing).
- `hbsdata.path`: `Path.parse` reads template paths such as `a.b`, `./a/b`,
  `../name`, `@root/x`, `this.[0]` and `@../index`. `Path.segs()` gives the
  segments of a relative path and `Path.local` the level and name of a local
  variable such as `@index`. `merge_json_path` joins the named segments onto a
  base path.
- `hbsdata.block`: `BlockContext`, one block scope, with a base path or base
  value, local variables, and block parameters (`BlockParams`,
  `BlockParamHolder`) that refer either to a path or to a value.
- `hbsdata.context`: `Context` wraps the data being rendered;
  `Context.navigate` resolves path segments against a sequence of block scopes,
  innermost first, following `..`, `@root` and block parameters. `merge_json`
  overlays entries on an object, and `create_block` starts a block scope from a
  parameter.
- `hbsdata.extras`: `compare_json`, `eq`, `ne`, `gt`, `gte`, `lt`, `lte`,
  `logical_not`, `length`, `all_truthy`, `any_truthy` and `lookup`.
- `hbsdata.casing`: `lower_camel_case`, `upper_camel_case`, `snake_case`,
  `kebab_case`, `shouty_snake_case`, `shouty_kebab_case`, `title_case`,
  `train_case`, and `apply_case`, which picks one by its template helper name
  (`snakeCase`, `titleCase`, ...).
- `hbsdata.errors`: `RenderError` and `TemplateError`, each with a `kind`
  (`RenderErrorKind`, `TemplateErrorKind`) that says what went wrong.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Navigating a context:

```python
from collections import deque

from hbsdata.context import Context
from hbsdata.path import Path

ctx = Context.wraps({"addr": {"country": "China"}, "titles": ["programmer"]})
print(ctx.navigate(Path.parse("addr.[country]").segs(), deque()).render())  # China
print(ctx.navigate(Path.parse("titles.[0]").segs(), deque()).render())      # programmer
```

Using the helpers:

```python
from hbsdata.extras import gt, lookup
from hbsdata.casing import apply_case

gt(53, "35")                              # True
lookup({"a": "world"}, "a", strict=False) # "world"
apply_case("snakeCase", "snake case")     # "snake_case"
```

Some details of the helpers:

- Numbers compare exactly, strings by code point, and a number compares with a
  string when the string is a JSON number. Values that cannot be ordered make
  every ordering helper return `False`.
- `eq` treats an integer and a float as different values, so `eq(5, 5.0)` is
  `False`.
- `length` counts items of arrays and objects, UTF-8 bytes of strings, and
  gives `0` for anything else.
- `lookup` returns `None` when nothing is found, or raises `RenderError` when
  `strict=True`.

## Errors

An invalid path, a non-numeric index into an array, a missing helper argument
or a value that cannot be converted raises `RenderError`. When `line_no` and
`column_no` are set, its message names the template and position.

`TemplateError.at(template_str, line_no, column_no)` attaches a position, and
the message then shows the surrounding lines of the template with a marker
under the column; `in_template(name)` attaches the template name.

## What this package does not do

It has no template parser, no renderer, no template registry, no partials and
no command-line tool. It supplies the values, paths, scopes, helpers and errors
that such an engine works with.