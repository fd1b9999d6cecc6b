"""Built-in binding configuration that seeds every table before user overrides."""

from __future__ import annotations

DEFAULT_CONFIG = """\
[normal]
j = MoveDown
k = MoveUp
h = MoveUpDir
l = EnterDir
q = Quit
gg = MoveToTop
G = MoveToBottom
yy = CopyFiles
dd = CutFiles
p = PasteFiles
: = OpenCommandMode
b = ToggleBookmark
<C-w><C-h> = MoveToLeftPanel
<C-w><C-l> = MoveToRightPanel
<C-h> = MoveToLeftPanel
<C-l> = MoveToRightPanel
z = ToggleHiddenFiles
v = ToggleVisualMode

[visual]
j = MoveDown
k = MoveUp
gg = MoveToTop
G = MoveToBottom
y = CopyFiles
d = CutFiles
v = ToggleVisualMode
: = OpenCommandMode
"""

__all__ = ["DEFAULT_CONFIG"]
