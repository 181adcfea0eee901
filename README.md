# split_tui

Building blocks for a split-pane terminal workspace: a binary layout tree
of panes, the geometry that places them on screen, the encoding of key
events into the bytes a terminal program expects, and the scraping of an
agent's "resume" hint from its last screen of output.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `split_tui.utils`: `Rect` (with `right()` and `bottom()`), `Direction`,
  `SplitSide`, the input types `KeyCode`, `KeyModifiers` and `KeyEvent`,
  and the functions `key_to_bytes`, `arrow_key_to_split_side`, `contains`
  and `resolve_login_shell_command` (which turns the `__SHELL__`
  sentinel into `$SHELL`, or `/bin/sh` when it is unset).
- `split_tui.geometry`: pane chrome areas (`pane_title_y`,
  `pane_title_bar_area`, `pane_inner_area`, `pane_title_hit_area`),
  `Placement` with its title, maximize and close hit tests, ratio
  arithmetic in basis points (`normalize_ratio`,
  `proportional_first_size`, `ratio_for_first_rendered_size`), splitting
  of rectangles (`split_area_by_ratio`, `split_inner_with_divider`,
  `split_debug_container_with_divider`) and adjacency between panes
  (`adjacent_overlap`, `placement_is_adjacent`, `overlap`).
- `split_tui.tree`: the `Node` layout tree. It splits, resizes and
  deletes panes, lists placements and draggable dividers
  (`collect`, `placement_at`, `collect_resize_boundaries`,
  `collect_debug_areas`, `collect_debug_resize_boundaries`), and
  converts to and from a compact text form such as
  `S(H,5000,L(0),L(1))` (`serialize`, `deserialize`; the latter raises
  `ValueError` on malformed input).
- `split_tui.resume`: `extract_resume_command` finds the most recent
  resume hint for an agent binary in a list of screen rows, `find_token`
  locates a whole-word match, and `exec_argv` builds the argument list
  that runs a command line (a single word directly, anything else through
  `/bin/sh -c`; a blank line raises `ValueError`).

## Example

```python
from split_tui.tree import Node
from split_tui.utils import KeyEvent, KeyModifiers, Rect, SplitSide, key_to_bytes
from split_tui.resume import exec_argv, extract_resume_command

layout = Node.leaf(0)
layout.split_leaf(0, SplitSide.RIGHT, 1)
layout.resize_between(0, 1, SplitSide.RIGHT, 5, Rect(0, 0, 100, 20))
print(layout.serialize())   # S(H,5500,L(0),L(1))

restored = Node.deserialize(layout.serialize())
print(restored.leaf_ids())  # [0, 1]

print(key_to_bytes(KeyEvent("c", KeyModifiers.CONTROL)))  # b'\x03'

rows = ["Bye!", "To resume this session, run `codex resume abc-123-def`."]
hint = extract_resume_command("codex", rows)
print(hint)                 # codex resume abc-123-def
print(exec_argv(hint))      # ['/bin/sh', '-c', 'codex resume abc-123-def']
```

## What this package does not do

It has no command to run and draws nothing on screen: there is no event
loop, no rendering of panes, modals or buttons, and no pseudo-terminal
handling or terminal emulation. It ships no colour themes, no agent
presets, and does not read or write any layout or settings file; the
text form from `Node.serialize` is there for callers who want to store a
layout themselves.