"""
Read-aloud via the browser's speechSynthesis API.

Streamlit has no speech output of its own. read_aloud() renders a zero-height
custom component (read_aloud/index.html) that speaks the current step and
reports back when the utterance ends or fails, so cooking mode can return to
idle like the Stop button does. The browser holds at most one utterance: every
new one cancels whatever is playing.

cancel_speech() is a one-way script for pages where the component is no
longer rendered (e.g. right after leaving cooking mode).
"""

from pathlib import Path
from typing import Optional

import streamlit.components.v1 as components

from fridgechef.cooking import READ_ALOUD_PITCH, READ_ALOUD_RATE

_COMPONENT_DIR = Path(__file__).resolve().parent / "read_aloud"

_read_aloud_component = components.declare_component("read_aloud", path=str(_COMPONENT_DIR))

_CANCEL_SCRIPT = """
<script>
(function() {
    const synth = window.parent.speechSynthesis || window.speechSynthesis;
    if (synth) { synth.cancel(); }
})();
</script>
"""


def read_aloud(
    text: str,
    utterance_id: Optional[str],
    rate: float = READ_ALOUD_RATE,
    pitch: float = READ_ALOUD_PITCH,
) -> Optional[str]:
    """
    Render the read-aloud player.

    Args:
        text: Text to speak
        utterance_id: Id of the utterance to play, or None to stay silent
                      (stopping anything this player started)
        rate: Speech rate
        pitch: Speech pitch

    Returns:
        Id of the last utterance that ended or failed, or None if none has
    """
    event = _read_aloud_component(
        text=text,
        utterance_id=utterance_id,
        rate=rate,
        pitch=pitch,
        key="read_aloud",
        default=None,
    )
    if isinstance(event, dict) and isinstance(event.get("ended"), str):
        return event["ended"]
    return None


def cancel_speech() -> None:
    """Stop any utterance in progress."""
    components.html(_CANCEL_SCRIPT, height=0)
