# bsqsolver

Finds the biggest square that fits in a map without covering any obstacle.
It then prints the map again with that square drawn in the *full* character.

## Map format

The first line is the header. It starts with the number of map lines and
ends with three different characters: *empty*, *obstacle* and *full*. Every
line after the header is one row of the map.

```
9.ox
...........................
....o......................
............o..............
...........................
....o......................
...............o...........
...........................
......o..............o.....
..o.......o................
```

A map is rejected when:

- the header has fewer than four characters,
- the number at the start of the header is missing or zero,
- two of the three symbols are the same,
- the rows do not all have the same length,
- there are fewer rows than the header asks for.

The header ends at the first newline within its first 31 characters. When
there is no newline there, the first 31 characters are taken as the header.
Rows after the number given in the header are ignored.

Any character that is not the obstacle counts as free space. If no free cell
exists, the map is printed unchanged.

If more than one square has the biggest size, the chosen one is the square
whose bottom-right corner comes first. The search goes through the rows from
the top, and through each row from left to right.

## Command line

```
bsq map1.txt map2.txt
```

Each file is solved and printed. A blank line separates the results of two
files. When no file is given, the map is read from standard input:

```
bsq < map.txt
```

A map that cannot be read or is not valid prints `map error`. The command
always exits with status 0.

## Library use

```python
from bsqsolver.parser import load_map, MapError
from bsqsolver.solver import solve, render

try:
    grid_map = load_map("map.txt")
except MapError:
    print("map error")
else:
    square = solve(grid_map)
    print(render(grid_map, square), end="")
```

- `bsqsolver.parser.load_map(filename)` reads a UTF-8 map file. It raises
  `MapError` when the file cannot be opened or decoded, or when the map is
  invalid.
- `bsqsolver.parser.parse_map(stream)` reads a map from any open text stream.
- `bsqsolver.parser.parse_header(line)` checks a header line on its own. It
  returns `(line_count, empty, obstacle, full)`.
- `bsqsolver.parser.Map` is a frozen dataclass with the fields `empty`,
  `obstacle`, `full` and `rows`, and the properties `lines` and `cols`.
- `bsqsolver.parser.MapError` is a subclass of `ValueError`.
- `bsqsolver.solver.solve(grid_map)` returns a `Square(x, y, size)`. `x` and
  `y` are the column and row of the bottom-right corner. `size` is 0 when
  there is no free cell.
- `bsqsolver.solver.render(grid_map, square)` returns the map text with the
  square filled in. Every row ends with a newline.
- `bsqsolver.cli.process(filename, out)` solves one file, or standard input
  when `filename` is `None`, and writes the result or `map error` to `out`.
- `bsqsolver.cli.main(argv=None)` is what the `bsq` command runs.

## Tests

```
pip install -e ".[test]"
pytest
```