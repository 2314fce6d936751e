"""Configuration for the lyric display adjustments.

Limits and labels are immutable values. The defaults reproduce the ranges of
the lyrics view; a host application may pass its own :class:`SettingsConfig`
(e.g., with translated labels) to the adjustment controller.

Examples
--------
>>> from chordpro_engine.settings import AdjustmentController
>>> config = SettingsConfig(labels=DisplayLabels(none="ninguno", fret="traste"))
>>> AdjustmentController(config=config).capo.display()
'ninguno'
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _known_fields(cls: type, values: dict) -> dict:
    """Keep only the entries of ``values`` that are fields of ``cls``."""
    return {k: v for k, v in values.items() if k in cls.__dataclass_fields__}


@dataclass(frozen=True, slots=True)
class CounterSpec:
    """Range and step of one bounded counter.

    Parameters
    ----------
    step : float
        Amount added or removed by one increase or decrease.
    minimum : float
        Lowest allowed value.
    maximum : float
        Highest allowed value.
    default : float
        Value restored by reset.
    """

    step: float
    minimum: float
    maximum: float
    default: float

    def clamp(self, value: float) -> float:
        """Clamp ``value`` into ``[minimum, maximum]``."""
        return min(max(value, self.minimum), self.maximum)


@dataclass(frozen=True, slots=True)
class DisplayLabels:
    """Words used when displaying the capo position."""

    none: str = "none"
    fret: str = "fret"


FONT_SCALE = CounterSpec(step=0.25, minimum=0.5, maximum=3.0, default=1.0)
TRANSPOSE = CounterSpec(step=1, minimum=-6, maximum=6, default=0)
CAPO = CounterSpec(step=1, minimum=0, maximum=12, default=0)


@dataclass(frozen=True, slots=True)
class SettingsConfig:
    """Immutable configuration of the adjustment controller.

    Parameters
    ----------
    font_scale : CounterSpec
        Limits of the font scale counter.
    transpose : CounterSpec
        Limits of the transpose counter, in semitones.
    capo : CounterSpec
        Limits of the capo counter, in frets.
    labels : DisplayLabels
        Words used by the capo display.
    """

    font_scale: CounterSpec = FONT_SCALE
    transpose: CounterSpec = TRANSPOSE
    capo: CounterSpec = CAPO
    labels: DisplayLabels = field(default_factory=DisplayLabels)

    @classmethod
    def from_dict(cls, config_dict: dict) -> SettingsConfig:
        """Create SettingsConfig from a dictionary.

        Nested values may be given as dicts. Unknown keys are ignored at
        every level.

        Parameters
        ----------
        config_dict : dict
            Settings keyed by field name.

        Returns
        -------
        SettingsConfig
            The configuration; missing fields keep their defaults.

        Examples
        --------
        >>> config = SettingsConfig.from_dict({
        ...     "capo": {"step": 1, "minimum": 0, "maximum": 7, "default": 0},
        ...     "labels": {"none": "-", "colour": "red"},
        ...     "unknown_key": "ignored",
        ... })
        >>> config.capo.maximum
        7
        >>> config.labels.fret
        'fret'
        """
        filtered = _known_fields(cls, config_dict)
        for name in ("font_scale", "transpose", "capo"):
            if isinstance(filtered.get(name), dict):
                filtered[name] = CounterSpec(**_known_fields(CounterSpec, filtered[name]))
        if isinstance(filtered.get("labels"), dict):
            filtered["labels"] = DisplayLabels(**_known_fields(DisplayLabels, filtered["labels"]))
        return cls(**filtered)


DEFAULT_CONFIG = SettingsConfig()
