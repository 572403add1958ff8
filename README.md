# hanschunks

hanschunks groups the elements of a plain-text document into chunks. It is
aimed mainly at Chinese text. The length of each chunk, in characters, is
kept within a configured range. Chunk boundaries follow the document's
structure: headings, list items, code fences and similar elements.

## Installation

```
pip install hanschunks
```

The package needs only the standard library.

## Modules

- `hanschunks.element`
  - `ElementType` is the kind of an element: `PARAGRAPH`, `LIST_ITEM`,
    `CODE_BLOCK`, `TABLE`, `QUOTE`, `EMPTY`, `FOOTER`, or a heading made with
    `ElementType.heading(level)`.
  - `Element(element_type, content, line_number)` is one piece of a document.
    It provides:
    - `char_count`
    - `is_split_boundary()`, true for headings, list items, code blocks and
      tables
    - `weight(weights)`
    - `has_strong_connection()`, true when the trimmed text ends in one of
      `:` `：` `,` `，` `、` `;` `；`
  - `ElementWeights` holds the split weight for each kind.
  - `SplitPoint` records an index, a weight and a character count.
- `hanschunks.config`
  - `ChunkConfig` holds `min_size`, `max_size`, `merge_headings`,
    `preserve_boundaries` and `element_weights`.
  - `set_element_weights(...)` replaces only the weights you pass.
- `hanschunks.recognizer`
  - `ElementRecognizer` is the abstract line classifier.
  - `DefaultRecognizer.recognize(line)` classifies a single line.
- `hanschunks.chunker`
  - `Chunker(config=None).chunk(elements)` returns a list of chunk strings.
  - `tokenize(text)` cuts text into word-level tokens.

## Line recognition

`DefaultRecognizer` first trims the line. It then checks the following rules
in order and returns the first match:

1. An empty line gives `EMPTY`.
2. Text such as `第 3 页` anywhere in the line gives `FOOTER`.
3. A line starting with three backticks gives `CODE_BLOCK`.
4. A line starting with `>` gives `QUOTE`.
5. A line starting with a bullet (`•`, `-` or `*` followed by a space), with
   `一、`, `二：` and the like, or with `1、`, `2:` or `3.` gives `LIST_ITEM`.
6. A line starting with `第一章`, `第二节`, `一、` or `三.` gives heading level 1.
7. A line starting with `（一）` or `(二)` gives heading level 2.
8. A numbered title such as `1.2 概述`, or a line starting with `(1)` or `1）`,
   gives heading level 3.
9. A line under 40 UTF-8 bytes that does not end in sentence punctuation
   (`。！？；.!?;`) gives heading level 4.
10. Anything else gives `PARAGRAPH`.

## Chunking

`Chunker.chunk` works on a sequence of elements. Within a chunk, elements are
joined by newlines.

If the whole text already fits within `min_size` and `max_size`, it comes back
as one chunk. Otherwise the boundaries are chosen by dynamic programming:

- Each intermediate chunk must stay within the size limits.
- Splits at high-weight elements are preferred.
- Elements that are not split boundaries count at a tenth of their weight.
- A chunk ending in a connecting mark is heavily penalised.
- A final chunk longer than `max_size` is penalised in proportion to how
  much it is over.

A final piece that is still longer than `max_size` is cut up further. It is
first packed greedily line by line. If it is a single line, it is packed from
`tokenize` tokens instead. Those tokens are:

- runs of ASCII letters and digits
- runs of whitespace
- any other single character

## Usage

```python
from hanschunks.chunker import Chunker
from hanschunks.config import ChunkConfig
from hanschunks.element import Element, ElementType
from hanschunks.recognizer import DefaultRecognizer

text = open("report.txt", encoding="utf-8").read()

recognizer = DefaultRecognizer()
elements = [
    Element(kind, line.strip(), number)
    for number, line in enumerate(text.splitlines(), start=1)
    if (kind := recognizer.recognize(line)) not in (ElementType.EMPTY, ElementType.FOOTER)
]

config = ChunkConfig(min_size=300, max_size=600)
config.set_element_weights(heading_base=120.0, list_item=50.0)

for piece in Chunker(config).chunk(elements):
    print(len(piece), piece[:20])
```

### Defaults

| Setting | Default |
|---|---|
| `min_size` | 512 |
| `max_size` | 800 |
| `merge_headings` | `True` |
| `preserve_boundaries` | `True` |

| Weight | Default |
|---|---|
| `heading_base` | 100 |
| `heading_level_penalty` | 10 per level |
| `code_block` | 80 |
| `table` | 80 |
| `list_item` | 60 |
| `paragraph` | 40 |
| `quote` | 30 |
| `empty` | 10 |
| `footer` | 0 |

## What the package does not do

There is no single call that takes a whole document and returns chunks. The
caller turns the text into `Element` objects, for example with
`DefaultRecognizer` as shown above.

The package does not do the following:

- gather consecutive paragraph lines into one element
- merge headings with the content beneath them

`ChunkConfig.merge_headings` and `preserve_boundaries` are stored, but
`Chunker` does not read them.

There is no command-line tool.