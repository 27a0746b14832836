# sysprog

A collection of small, self-contained systems tools, each usable as a
command or as a Python module.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `sysprog-template-basic` | Reads template lines from standard input and fills in the first `{{variable}}` on each line. |
| `sysprog-template` | Like the above, but substitutes every whitespace-separated word holding a `{{variable}}`. |
| `sysprog-imagecli` | Resizes JPG/PNG images into a `tmp/` folder beside them, or reports image statistics. |
| `sysprog-rstat` | Counts `.rs` files, code lines, comment lines and blank lines below a directory. |
| `sysprog-srcstats-parallel` | Same counts for several directories listed in a file, one worker thread per directory. |
| `sysprog-myshell` | A minimal interactive shell with `show files`, `show process` and `quit`. |
| `sysprog-origin` | An HTTP origin server answering `GET /order/status/<number>`. |
| `sysprog-proxy` | A TCP proxy relaying one request and one response per connection to an origin server. |
| `sysprog-echo` | TCP and UDP echo servers and clients. |
| `sysprog-textviewer` | A read-only terminal viewer for text files with cursor movement. |
| `sysprog-hello` | Prints a greeting from the library, or the process id with `--pid`. |
| `sysprog-channels` | Two producer threads send values to one receiver, which prints them as they arrive. |

### Template rendering

Both template commands read lines from standard input with a context of
`name = Bob` and `city = Boston`:

```
echo "Hi {{name}} , welcome to {{city}}" | sysprog-template
```

Lines with `{% ... %}` containing `for` and `in` (or `endfor`) print
`For Tag not implemented`; those containing `if` print
`If Tag not implemented`. Other lines without markup are printed
unchanged. `sysprog-template-basic` renders an unknown variable as empty
text; `sysprog-template` raises `KeyError` for one.

### Image resizing

```
sysprog-imagecli resize --size small --mode single --srcfolder photos/image1.jpg
sysprog-imagecli resize --size large --mode all --srcfolder photos/
sysprog-imagecli stats --srcfolder photos/
```

Sizes are `small` (200px), `medium` (400px) and `large` (800px); an
unknown size falls back to `small`. Modes are `single` and `all`; any
other mode is rejected. Images keep their aspect ratio and are written
as `tmp/<name>.png`. Only files directly in the folder whose extension
is exactly `jpg`, `JPG`, `png` or `PNG` are considered. `stats` reports
the file count and their total size in whole megabytes.

### Source statistics

```
sysprog-rstat path/to/project -m src
```

Any mode other than `src` prints `Sorry, no stats`. Empty lines count
as blanks, lines starting with `//` after leading whitespace as
comments, everything else as code.

```
sysprog-srcstats-parallel dirnames.txt
```

reads one directory per line (default `dirnames.txt`); here only lines
starting with `//` in the first column count as comments.

### Shell

```
sysprog-myshell
```

`show files` runs `ls` and `show process` runs `ps`, passing on any
further words; `quit` or end of input exits; anything else is run as a
program with its arguments.

### Servers

```
sysprog-origin --host 127.0.0.1 --port 3000
sysprog-proxy 127.0.0.1:8081 127.0.0.1:3000
```

The origin server answers `GET /order/status/<number>` with 200 and
`Shipped`, and anything else with 404. The proxy checks that the origin
is reachable before accepting connections, so start the origin first.

```
sysprog-echo tcp-server --port 3000
sysprog-echo tcp-client --message "Hello from TCP client"
sysprog-echo udp-server
sysprog-echo udp-client --message "hello"
```

The UDP server replies with `Received this: <message>`.

### Text viewer

```
sysprog-textviewer notes.txt
```

Arrow keys move the cursor, Backspace moves left and Ctrl-Q quits.

## Library use

```python
from sysprog.template_engine import render_line

render_line("Hi {{name}} , welcome to {{city}}", {"name": "Bob", "city": "Boston"})
```

```python
from sysprog.mathexpr import BinaryOp, BinaryOperator, Number, Tokenizer, evaluate

list(Tokenizer("3+2"))          # NUM, ADD, NUM, EOF tokens
evaluate(BinaryOp(BinaryOperator.CARET, Number(2), Number(3)))  # 8.0
```

Other modules: `sysprog.imagix`, `sysprog.srcstats`, `sysprog.myshell`,
`sysprog.origin`, `sysprog.proxy`, `sysprog.echo`, `sysprog.textviewer`,
`sysprog.basics` and `sysprog.channels`.

## What the package does not do

- `sysprog.mathexpr` tokenizes expressions and evaluates expression
  trees, but has no parser that builds a tree from tokens and no
  calculator command; trees must be built in code.
- The template commands recognise `for` and `if` tags but do not
  execute them.
- The text viewer only displays files; it does not edit or save them.