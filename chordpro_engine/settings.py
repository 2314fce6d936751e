"""Bounded display adjustments for a lyric sheet.

An :class:`AdjustmentController` holds the font scale, transpose and capo of
one editing session. Every change is clamped to its configured range and
reported to a single callback with the full snapshot, so the caller can
persist it (debouncing is up to the caller).

Examples
--------
>>> seen = []
>>> settings = AdjustmentController(on_change=seen.append)
>>> settings.capo.increase()
>>> settings.capo.display()
'fret 1'
>>> seen[-1]
AdjustmentSnapshot(capo=1, transpose=0, font_scale=1.0)
>>> settings.effective_key("G")
'G#'
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass

from chordpro_engine.config import DEFAULT_CONFIG, CounterSpec, SettingsConfig
from chordpro_engine.pitch_class import calculate_capo_key, calculate_effective_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdjustmentSnapshot:
    """Values of all three adjustments at one point in time.

    Parameters
    ----------
    capo : int
        Capo fret (0 = no capo).
    transpose : int
        Transposition in semitones.
    font_scale : float
        Lyrics font scale factor.
    """

    capo: int = 0
    transpose: int = 0
    font_scale: float = 1.0

    def as_dict(self) -> dict[str, float]:
        """Return the snapshot as a plain dict for storage."""
        return asdict(self)


class BoundedCounter:
    """A number that moves in fixed steps within a closed range.

    Parameters
    ----------
    spec : CounterSpec
        Step, range and default of the counter.
    formatter : Callable[[float], str]
        Turns the current value into display text.
    on_change : Callable[[], None] | None
        Called after every increase, decrease and reset.
    value : float | None
        Initial value, clamped into range; the default if None.
    """

    def __init__(
        self,
        spec: CounterSpec,
        formatter: Callable[[float], str],
        on_change: Callable[[], None] | None = None,
        value: float | None = None,
    ) -> None:
        self.spec = spec
        self._formatter = formatter
        self._on_change = on_change
        self._value = spec.clamp(spec.default if value is None else value)

    @property
    def value(self) -> float:
        return self._value

    def increase(self) -> None:
        """Add one step, clamped to the maximum."""
        self._set(self._value + self.spec.step)

    def decrease(self) -> None:
        """Remove one step, clamped to the minimum."""
        self._set(self._value - self.spec.step)

    def reset(self) -> None:
        """Return to the default and notify."""
        self._set(self.spec.default)

    def is_at_default(self) -> bool:
        """Whether the value equals the default."""
        return self._value == self.spec.default

    def is_at_min(self) -> bool:
        """Whether the value is at the lower bound."""
        return self._value <= self.spec.minimum

    def is_at_max(self) -> bool:
        """Whether the value is at the upper bound."""
        return self._value >= self.spec.maximum

    def display(self) -> str:
        return self._formatter(self._value)

    def restore_default(self) -> None:
        """Return to the default without notifying."""
        self._set(self.spec.default, notify=False)

    def _set(self, value: float, *, notify: bool = True) -> None:
        self._value = self.spec.clamp(value)
        if notify and self._on_change is not None:
            self._on_change()

    def __repr__(self) -> str:
        return f"BoundedCounter(value={self._value!r}, spec={self.spec!r})"


class AdjustmentController:
    """Font scale, transpose and capo of one editing session.

    Parameters
    ----------
    initial : AdjustmentSnapshot | None
        Stored values to start from; defaults otherwise. Out of range values
        are clamped without a notification.
    on_change : Callable[[AdjustmentSnapshot], None] | None
        Receives the full snapshot after every change.
    config : SettingsConfig
        Counter limits and display labels.
    """

    def __init__(
        self,
        initial: AdjustmentSnapshot | None = None,
        on_change: Callable[[AdjustmentSnapshot], None] | None = None,
        config: SettingsConfig = DEFAULT_CONFIG,
    ) -> None:
        initial = initial or AdjustmentSnapshot(
            capo=int(config.capo.default),
            transpose=int(config.transpose.default),
            font_scale=config.font_scale.default,
        )
        self.config = config
        self._on_change = on_change

        self.font_scale = BoundedCounter(
            config.font_scale, self._format_font_scale, self._notify, initial.font_scale
        )
        self.transpose = BoundedCounter(
            config.transpose, self._format_transpose, self._notify, initial.transpose
        )
        self.capo = BoundedCounter(config.capo, self._format_capo, self._notify, initial.capo)

    def snapshot(self) -> AdjustmentSnapshot:
        """Return the current values of all three adjustments."""
        return AdjustmentSnapshot(
            capo=int(self.capo.value),
            transpose=int(self.transpose.value),
            font_scale=float(self.font_scale.value),
        )

    def has_modifications(self) -> bool:
        """Whether any adjustment differs from its default."""
        return not (
            self.font_scale.is_at_default()
            and self.transpose.is_at_default()
            and self.capo.is_at_default()
        )

    def reset_all(self) -> None:
        """Restore all defaults and notify once."""
        for counter in (self.font_scale, self.transpose, self.capo):
            counter.restore_default()
        self._notify()

    def effective_key(self, song_key: str) -> str:
        """The key that sounds for ``song_key`` with the current adjustments."""
        return calculate_effective_key(song_key, int(self.transpose.value), int(self.capo.value))

    def capo_key(self, song_key: str) -> str:
        """The key whose shapes are played for ``song_key`` with the capo."""
        return calculate_capo_key(song_key, int(self.capo.value))

    def _notify(self) -> None:
        snapshot = self.snapshot()
        logger.debug("Adjustments changed: %s", snapshot)
        if self._on_change is not None:
            self._on_change(snapshot)

    @staticmethod
    def _format_font_scale(value: float) -> str:
        return f"{value:g}"

    @staticmethod
    def _format_transpose(value: float) -> str:
        semitones = int(value)
        return f"+{semitones}" if semitones > 0 else str(semitones)

    def _format_capo(self, value: float) -> str:
        fret = int(value)
        if fret == 0:
            return self.config.labels.none
        return f"{self.config.labels.fret} {fret}"
