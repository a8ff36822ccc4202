# splkit

A small library of everyday building blocks, meant for teaching and for
small programs. It has no dependencies beyond the standard library.

## Modules

- `splkit.strlib`: string helpers. `concat`, `char_at` (index `len(s)` gives
  `"\0"`), `substring(s, p1, p2)` with inclusive, clamped bounds,
  `char_to_string`, `string_length`, `copy_string`, `string_equal`,
  `string_equal_ignore_case`, `string_compare` (returns -1, 0 or +1),
  `starts_with`, `ends_with`, `find_char`, `find_string`, `find_last_char`,
  `find_last_string`, `to_lower_case`, `to_upper_case`, `integer_to_string`,
  `string_to_integer`, `real_to_string` (`%G` style), `string_to_real`,
  `trim`, `quote_string`, `quote_html`, `string_array_length` and
  `search_string_array` (both stop at the first `None` entry).
  Passing `None` where a string is required raises `TypeError`; text that
  is not a number raises `ValueError` from the parsing functions.
- `splkit.cmpfn`: three-way comparisons returning -1, 0 or +1: `compare`,
  `pointer_compare` (orders objects by identity) and `compare_for_type`,
  which picks one for a base-type name such as `"int"`, `"string"` or
  `"pointer"` and raises `ValueError` for an unknown name.
- `splkit.strbuf`: `StringBuffer`, a growable string with `push_char`,
  `pop_char`, `append`, `printf(fmt, *args)` and `clear`; `str(sb)` gives
  its contents and `len(sb)` its length. `printf_capacity(fmt, *args)`
  returns an upper bound on the length of printf-style output.
- `splkit.stack`: `Stack` with `push`, `pop`, `peek`, `clear` and `copy`.
  Popping or peeking an empty stack raises `IndexError`; iteration runs
  from the top of the stack to the bottom.
- `splkit.vector`: `Vector`, an indexed collection with `add`, `insert`,
  `remove`, `clear`, `copy` and `to_list`. Indexing checks bounds and
  rejects negative indices with `IndexError`.
- `splkit.bst`: `BST(base_type, compare=None)`, a binary search tree of
  `BSTNode` objects (each with `key`, `value`, `left`, `right` and
  `key_string`). It offers `insert`, `find`, `remove`, `clear`, `copy`,
  `nodes(order)` for `TraversalOrder.PREORDER`, `INORDER` or `POSTORDER`,
  `in`, `len` and iteration over keys in ascending order.
- `splkit.simpio`: `read_line` treats `\n`, `\r` and `\r\n` as line ends and
  returns `None` at end of file; `get_line` reads from standard input by
  default; `read_lines_from_stream` and `read_lines_from_file` (where `"-"`
  means standard input) return lists of lines. `get_integer`, `get_long`
  and `get_real` read lines until one holds a single number, writing a
  complaint and `Retry: ` to the output stream after each bad line, and
  raise `EOFError` if the input runs out.
- `splkit.testreport`: `TestReport(out=None, verbose=False)`, a console
  reporter with `test_module(name, fn)`, `check(expression, actual,
  expected)`, `report_error`, `report_message` and `adjust_indentation`;
  `classify_value_type` classifies the text of an expected value.
- `splkit.filelib`: `directory_path_separator`, `search_path_separator`,
  `file_exists`, `is_file`, `is_symbolic_link`, `is_directory`,
  `create_directory`, `delete_file`, `rename_file`, `list_directory`
  (sorted, without `.`, `..` and `.DS_Store`), `set_current_directory`,
  `get_current_directory` and `expand_pathname` (expands `~` and `~user`).

## Examples

```python
from splkit.strlib import substring, find_last_string, real_to_string
from splkit.strbuf import StringBuffer
from splkit.stack import Stack
from splkit.bst import BST, TraversalOrder

substring("abcde", 0, 1)                      # "ab"
find_last_string("abr", "abracadabra")        # 7
real_to_string(1.75e15)                       # "1.75E+15"

sb = StringBuffer()
sb.printf("The answer is %d", 42)
str(sb)                                       # "The answer is 42"

stack = Stack()
stack.push("A")
stack.push("B")
stack.pop()                                   # "B"

tree = BST("int")
for key in (5, 3, 8):
    tree.insert(key)
[node.key for node in tree.nodes(TraversalOrder.PREORDER)]  # [5, 3, 8]
list(tree)                                                  # [3, 5, 8]
```

Reading numbers from any text stream:

```python
import io, sys
from splkit.simpio import get_integer

get_integer(io.StringIO("abc\n 42 \n"), sys.stdout)
# writes "Please enter an integer" and "Retry: ", then returns 42
```

## What it does not include

splkit is a library only: it has no command-line program. It has no
graphics objects or windows and no sound playback.

## Installation and tests

```
pip install -e .[test]
pytest
```