"""Tests for statevector.py: validation, magnitudes, phases, labels, results."""

import math

import numpy as np
import pytest

from statevector import (
    MalformedStateVectorError,
    SimulationResult,
    StateVector,
    basis_label,
)


H = 1 / math.sqrt(2)


class TestBasisLabel:
    """Zero-padded binary labels."""

    def test_padded_to_width(self):
        assert basis_label(1, 3) == "001"
        assert basis_label(6, 3) == "110"

    def test_width_zero(self):
        assert basis_label(0, 0) == "0"

    def test_labels_cover_all_states_in_order(self):
        sv = StateVector(3, np.zeros(16))
        labels = sv.labels()
        assert labels == [format(i, "03b") for i in range(8)]
        assert len(set(labels)) == 8


class TestValidation:
    """Malformed state vectors are rejected at construction."""

    def test_odd_length_rejected(self):
        with pytest.raises(MalformedStateVectorError):
            StateVector(1, [1.0, 0.0, 0.0])

    def test_wrong_length_rejected(self):
        with pytest.raises(MalformedStateVectorError, match="expected 8"):
            StateVector(2, [1.0, 0.0, 0.0, 0.0])

    def test_negative_width_rejected(self):
        with pytest.raises(MalformedStateVectorError, match="non-negative"):
            StateVector(-1, [1.0, 0.0])

    @pytest.mark.parametrize("width", [1.0, "1", True, None])
    def test_non_integer_width_rejected(self, width):
        with pytest.raises(MalformedStateVectorError):
            StateVector(width, [1.0, 0.0, 0.0, 0.0])

    def test_is_value_error(self):
        assert issubclass(MalformedStateVectorError, ValueError)

    def test_numpy_integer_width_accepted(self):
        sv = StateVector(np.int64(1), [1.0, 0.0, 0.0, 0.0])
        assert sv.qubit_width == 1
        assert isinstance(sv.qubit_width, int)

    def test_bases_read_only(self):
        sv = StateVector(0, [1.0, 0.0])
        with pytest.raises(ValueError):
            sv.bases[0] = 0.5

    def test_input_list_not_aliased(self):
        raw = np.array([1.0, 0.0])
        sv = StateVector(0, raw)
        raw[0] = 0.0
        assert sv.bases[0] == 1.0

    def test_non_numeric_component_rejected(self):
        with pytest.raises(MalformedStateVectorError, match="numeric"):
            StateVector(1, [1, 0, "x", 0])

    def test_nested_bases_rejected(self):
        with pytest.raises(MalformedStateVectorError, match="flat"):
            StateVector(1, [[1, 0], [0, 0]])

    def test_ragged_bases_rejected(self):
        with pytest.raises(MalformedStateVectorError):
            StateVector(1, [[1, 0], [0]])


class TestFromMapping:
    """Engine wire shape {"qubitWidth", "bases"}."""

    def test_round_trip_fields(self):
        sv = StateVector.from_mapping({"qubitWidth": 1, "bases": [1, 0, 0, 0]})
        assert sv.qubit_width == 1
        assert sv.to_mapping() == {"qubitWidth": 1, "bases": [1.0, 0.0, 0.0, 0.0]}

    def test_missing_field(self):
        with pytest.raises(MalformedStateVectorError, match="bases"):
            StateVector.from_mapping({"qubitWidth": 1})

    @pytest.mark.parametrize("raw", [[1, 0], "state", None])
    def test_non_mapping_rejected(self, raw):
        with pytest.raises(MalformedStateVectorError, match="object"):
            StateVector.from_mapping(raw)

    def test_from_amplitudes(self):
        sv = StateVector.from_amplitudes([H, 0, 0, 1j * H])
        assert sv.qubit_width == 2
        np.testing.assert_allclose(sv.bases, [H, 0, 0, 0, 0, 0, 0, H])

    def test_from_amplitudes_requires_power_of_two(self):
        with pytest.raises(MalformedStateVectorError):
            StateVector.from_amplitudes([1, 0, 0])


class TestMagnitudes:
    """|amplitude| = sqrt(real^2 + imag^2)."""

    def test_magnitude_per_basis_state(self):
        bases = [0.6, 0.0, 0.0, 0.8, 0.3, 0.4, 0.0, 0.0]
        sv = StateVector(2, bases)
        mags = sv.magnitudes()
        for k in range(4):
            expected = math.sqrt(bases[2 * k] ** 2 + bases[2 * k + 1] ** 2)
            assert mags[k] == pytest.approx(expected)

    def test_normalized_fixture_sums_to_one(self):
        sv = StateVector(2, [H, 0, 0, 0, 0, 0, 0, H])
        assert float(np.sum(sv.magnitudes() ** 2)) == pytest.approx(1.0)

    def test_probabilities(self):
        sv = StateVector(1, [0.6, 0.0, 0.0, 0.8])
        np.testing.assert_allclose(sv.probabilities(), [0.36, 0.64])


class TestPhases:
    """Phase in degrees, (-180, 180], with 0 for the zero amplitude."""

    def test_cardinal_directions(self):
        sv = StateVector(2, [1, 0, 0, 1, -1, 0, 0, -1])
        np.testing.assert_allclose(sv.phases(), [0.0, 90.0, 180.0, -90.0])

    def test_zero_amplitude_has_zero_phase(self):
        sv = StateVector(0, [0.0, 0.0])
        assert sv.phases()[0] == 0.0

    def test_negative_zero_imag_folds_to_180(self):
        sv = StateVector(0, [-1.0, -0.0])
        assert sv.phases()[0] == 180.0

    def test_no_negative_zero(self):
        sv = StateVector(0, [1.0, -0.0])
        assert f"{sv.phases()[0]:.2f}" == "0.00"

    def test_diagonal(self):
        sv = StateVector(0, [-1.0, -1.0])
        assert sv.phases()[0] == pytest.approx(-135.0)


class TestSimulationResult:
    """Engine result parsing."""

    def test_full_result(self):
        result = SimulationResult.from_mapping({
            "statevector": {"qubitWidth": 1, "bases": [H, 0, H, 0]},
            "probabilities": [0.5, 0.5],
            "times": {"parsing": 1, "simulation": 2.5},
        })
        assert result.statevector.qubit_width == 1
        np.testing.assert_allclose(result.probabilities, [0.5, 0.5])
        assert result.times == {"parsing": 1.0, "simulation": 2.5}

    def test_probabilities_derived_when_missing(self):
        result = SimulationResult.from_mapping({
            "statevector": {"qubitWidth": 1, "bases": [0.6, 0, 0, 0.8]},
        })
        np.testing.assert_allclose(result.probabilities, [0.36, 0.64])
        assert result.times == {}

    def test_probability_count_mismatch(self):
        with pytest.raises(MalformedStateVectorError, match="probabilities"):
            SimulationResult.from_mapping({
                "statevector": {"qubitWidth": 1, "bases": [1, 0, 0, 0]},
                "probabilities": [1.0],
            })

    def test_missing_statevector(self):
        with pytest.raises(MalformedStateVectorError):
            SimulationResult.from_mapping({"probabilities": [1.0]})


    def test_non_mapping_statevector(self):
        with pytest.raises(MalformedStateVectorError, match="object"):
            SimulationResult.from_mapping({"statevector": [1, 0]})

    def test_non_mapping_result(self):
        with pytest.raises(MalformedStateVectorError, match="object"):
            SimulationResult.from_mapping([1, 0])

    def test_non_numeric_bases_in_result(self):
        with pytest.raises(MalformedStateVectorError):
            SimulationResult.from_mapping({
                "statevector": {"qubitWidth": 1, "bases": [1, 0, "x", 0]},
            })

    def test_non_numeric_probabilities(self):
        with pytest.raises(MalformedStateVectorError, match="probabilities"):
            SimulationResult.from_mapping({
                "statevector": {"qubitWidth": 0, "bases": [1, 0]},
                "probabilities": ["a"],
            })

    def test_non_numeric_times(self):
        with pytest.raises(MalformedStateVectorError, match="times"):
            SimulationResult.from_mapping({
                "statevector": {"qubitWidth": 0, "bases": [1, 0]},
                "times": {"simulation": "fast"},
            })
