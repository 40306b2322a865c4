"""Unit tests for vehicle rating-class assignment."""

import pytest

from tpa_quote_engine.services.rating.vehicle_class import (
    UNCLASSIFIED,
    VehicleClass,
    classify_vehicle,
    vehicle_class_tag,
)


class TestClassifyVehicle:
    @pytest.mark.parametrize(
        ("make", "model", "expected"),
        [
            ("Toyota", "Camry", VehicleClass.A),
            ("honda", "civic", VehicleClass.A),
            ("Ford", "F-150", VehicleClass.B),
            ("BMW", "X3", VehicleClass.B),
            ("Porsche", "Macan", VehicleClass.C),
            ("Land Rover", "Defender", VehicleClass.C),
        ],
    )
    def test_classified_makes(
        self, make: str, model: str, expected: VehicleClass
    ) -> None:
        assert classify_vehicle(make, model) == expected

    def test_ineligible_make_has_no_class(self) -> None:
        assert classify_vehicle("Ferrari", "Roma") is None

    def test_ineligible_model_has_no_class(self) -> None:
        """Performance models are unclassified even under classified makes."""
        assert classify_vehicle("Subaru", "WRX STI") is None
        assert classify_vehicle("Mercedes", "AMG GT") is None
        assert classify_vehicle("Subaru", "Outback") == VehicleClass.A

    def test_unknown_make(self) -> None:
        assert classify_vehicle("Zastava") is None


class TestVehicleClassTag:
    def test_tag_for_classified_vehicle(self) -> None:
        assert vehicle_class_tag("Toyota", "Corolla") == "A"

    def test_tag_for_unclassified_vehicle(self) -> None:
        assert vehicle_class_tag("Bugatti", "Chiron") == UNCLASSIFIED
