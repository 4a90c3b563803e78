"""State vector data model: amplitudes, magnitudes, phases, and labels.

A StateVector is the engine's output shape: a qubit width plus a flat
array of interleaved (real, imaginary) pairs, one pair per basis state.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np


class MalformedStateVectorError(ValueError):
    """Raised when a state vector violates its shape invariants."""


def basis_label(index: int, qubit_width: int) -> str:
    """Binary label for a basis state, zero-padded to qubit_width digits."""
    return format(index, "b").zfill(qubit_width)


@dataclass(frozen=True)
class StateVector:
    """Immutable state vector with interleaved real/imaginary components.

    Entry ``2k`` of ``bases`` is the real part and ``2k + 1`` the
    imaginary part of basis state ``k``.
    """

    qubit_width: int
    bases: np.ndarray

    def __post_init__(self):
        width = self.qubit_width
        if isinstance(width, bool) or not isinstance(width, (int, np.integer)):
            raise MalformedStateVectorError(
                f"qubit width must be an integer, got {width!r}"
            )
        if width < 0:
            raise MalformedStateVectorError(
                f"qubit width must be non-negative, got {width}"
            )

        try:
            bases = np.array(self.bases, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise MalformedStateVectorError(f"bases must be numeric: {exc}") from None
        if bases.ndim != 1:
            raise MalformedStateVectorError(
                f"bases must be a flat sequence, got {bases.ndim} dimension(s)"
            )
        expected = 2 * (1 << int(width))
        if bases.shape[0] != expected:
            raise MalformedStateVectorError(
                f"expected {expected} components for {width} qubit(s), "
                f"got {bases.shape[0]}"
            )
        bases.flags.writeable = False
        object.__setattr__(self, "qubit_width", int(width))
        object.__setattr__(self, "bases", bases)

    @classmethod
    def from_mapping(cls, raw: Mapping) -> StateVector:
        """Build from the engine wire shape ``{"qubitWidth", "bases"}``."""
        if not isinstance(raw, Mapping):
            raise MalformedStateVectorError(
                f"state vector must be an object, got {type(raw).__name__}"
            )
        try:
            return cls(qubit_width=raw["qubitWidth"], bases=raw["bases"])
        except KeyError as exc:
            raise MalformedStateVectorError(
                f"state vector is missing field {exc.args[0]!r}"
            ) from None

    @classmethod
    def from_amplitudes(cls, amplitudes) -> StateVector:
        """Build from a sequence of complex amplitudes (length 2**n)."""
        amps = np.asarray(amplitudes, dtype=np.complex128).ravel()
        count = amps.shape[0]
        if count == 0 or count & (count - 1):
            raise MalformedStateVectorError(
                f"amplitude count must be a power of two, got {count}"
            )
        bases = np.empty(2 * count, dtype=np.float64)
        bases[0::2] = amps.real
        bases[1::2] = amps.imag
        return cls(qubit_width=count.bit_length() - 1, bases=bases)

    def to_mapping(self) -> dict:
        return {"qubitWidth": self.qubit_width, "bases": self.bases.tolist()}

    @property
    def basis_count(self) -> int:
        return 1 << self.qubit_width

    def real(self) -> np.ndarray:
        return self.bases[0::2]

    def imag(self) -> np.ndarray:
        return self.bases[1::2]

    def amplitudes(self) -> np.ndarray:
        return self.real() + 1j * self.imag()

    def magnitudes(self) -> np.ndarray:
        """sqrt(real^2 + imag^2) per basis state."""
        return np.hypot(self.real(), self.imag())

    def probabilities(self) -> np.ndarray:
        return self.magnitudes() ** 2

    def phases(self) -> np.ndarray:
        """Phase angle in degrees per basis state, in (-180, 180].

        atan2(0, 0) is 0, so the zero amplitude has phase 0. A negative-zero
        imaginary part would give exactly -180; it is folded to 180.
        """
        phases = np.degrees(np.arctan2(self.imag(), self.real()))
        phases = np.where(phases <= -180.0, 180.0, phases)
        # Adding 0.0 turns -0.0 into 0.0 so labels never read "-0.00".
        return phases + 0.0

    def labels(self) -> list[str]:
        return [basis_label(i, self.qubit_width) for i in range(self.basis_count)]


@dataclass(frozen=True)
class SimulationResult:
    """A successful engine run: state vector, probabilities, and timings.

    ``times`` maps phase names (e.g. "parsing", "simulation") to
    durations in milliseconds.
    """

    statevector: StateVector
    probabilities: np.ndarray
    times: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping) -> SimulationResult:
        """Build from an engine result ``{"statevector", "probabilities", "times"}``."""
        if not isinstance(raw, Mapping):
            raise MalformedStateVectorError(
                f"result must be an object, got {type(raw).__name__}"
            )
        if "statevector" not in raw:
            raise MalformedStateVectorError("result has no state vector")
        statevector = StateVector.from_mapping(raw["statevector"])

        probabilities = raw.get("probabilities")
        if probabilities is None:
            probabilities = statevector.probabilities()
        else:
            try:
                probabilities = np.asarray(probabilities, dtype=np.float64)
            except (TypeError, ValueError) as exc:
                raise MalformedStateVectorError(
                    f"probabilities must be numeric: {exc}"
                ) from None
            if probabilities.shape != (statevector.basis_count,):
                raise MalformedStateVectorError(
                    f"expected {statevector.basis_count} probabilities, "
                    f"got {probabilities.size}"
                )

        raw_times = raw.get("times") or {}
        if not isinstance(raw_times, Mapping):
            raise MalformedStateVectorError("times must be an object")
        try:
            times = {str(k): float(v) for k, v in raw_times.items()}
        except (TypeError, ValueError) as exc:
            raise MalformedStateVectorError(f"times must be numeric: {exc}") from None
        return cls(statevector=statevector, probabilities=probabilities, times=times)
