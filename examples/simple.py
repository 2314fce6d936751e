import sys

from chordpro_engine import AdjustmentController, AdjustmentSnapshot, tokenize_document
from chordpro_engine.sheet import render_for_player

text = """{title: Amazing Grace}
{key: G}
[G]Amazing [C]grace
"""

# Token stream for highlighting
for token in tokenize_document(text):
    sys.stdout.write(f"{token.line}:{token.start}-{token.end} {token.kind} {token.text!r}\n")

# Display adjustments restored from storage
settings = AdjustmentController(AdjustmentSnapshot(capo=2), on_change=print)
settings.transpose.increase()
sys.stdout.write(f"Sounding key: {settings.effective_key('G')}\n")  # "A#"
sys.stdout.write(f"Shapes key: {settings.capo_key('G')}\n")  # "F"

snapshot = settings.snapshot()
sys.stdout.write(render_for_player(text, snapshot.transpose, snapshot.capo))
