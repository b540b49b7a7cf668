# tests/test_models.py
"""Unit tests for the Vehicle and Rental records: derived values, lifecycle hooks, constraints."""

import pytest
from datetime import date, datetime
from unittest.mock import patch
from sqlalchemy.exc import IntegrityError
from app.models import Rental, Vehicle
from app.models.vehicle import VehicleStatus
from app.models.rental import RentalStatus, PaymentStatus
from factories import make_vehicle, make_customer, make_rental


class TestVehicleDerivedValues:
    def test_display_name(self):
        vehicle = make_vehicle(year=2022, make="Toyota", model="Corolla")
        assert vehicle.display_name == "2022 Toyota Corolla"

    def test_available_only_when_status_available(self):
        assert make_vehicle(status=VehicleStatus.AVAILABLE).is_available is True
        for status in (VehicleStatus.RENTED, VehicleStatus.MAINTENANCE, VehicleStatus.OUT_OF_SERVICE):
            assert make_vehicle(status=status).is_available is False

    def test_constructor_leaves_status_unset(self):
        vehicle = make_vehicle()
        assert vehicle.status is None
        assert vehicle.created_at is None


class TestRentalDerivedValues:
    def test_rental_days_counts_both_ends(self):
        rental = make_rental(start_date=date(2024, 1, 1), end_date=date(2024, 1, 5))
        assert rental.rental_days == 5

    def test_same_day_rental_is_one_day(self):
        rental = make_rental(start_date=date(2024, 3, 10), end_date=date(2024, 3, 10))
        assert rental.rental_days == 1

    def test_rental_days_uses_actual_return_date(self):
        rental = make_rental(start_date=date(2024, 1, 1), end_date=date(2024, 1, 5),
                             actual_return_date=date(2024, 1, 8))
        assert rental.rental_days == 8

    def test_overdue_when_past_end_and_not_returned(self):
        rental = make_rental(end_date=date(2024, 1, 5))
        assert rental.overdue_as_of(date(2024, 1, 6)) is True
        assert rental.is_overdue is True   # today is long past 2024-01-05

    def test_not_overdue_on_end_date(self):
        rental = make_rental(end_date=date(2024, 1, 5))
        assert rental.overdue_as_of(date(2024, 1, 5)) is False

    def test_returned_rental_never_overdue(self):
        rental = make_rental(end_date=date(2024, 1, 5), actual_return_date=date(2024, 1, 20))
        assert rental.overdue_as_of(date(2030, 1, 1)) is False
        assert rental.is_overdue is False

    def test_total_mileage(self):
        rental = make_rental(start_mileage=1000, end_mileage=1250)
        assert rental.total_mileage == 250

    @pytest.mark.parametrize("start,end", [(1000, None), (None, 1250), (None, None)])
    def test_total_mileage_unknown_without_both_readings(self, start, end):
        rental = make_rental(start_mileage=start, end_mileage=end)
        assert rental.total_mileage is None


class TestLifecycleHooks:
    def test_defaults_resolved_on_first_save(self, db):
        customer, vehicle = make_customer(), make_vehicle()
        rental = make_rental(customer=customer, vehicle=vehicle)
        db.add(rental)
        db.commit()

        assert vehicle.status == VehicleStatus.AVAILABLE
        assert rental.status == RentalStatus.RESERVED
        assert rental.payment_status == PaymentStatus.PENDING

    def test_explicit_status_kept(self, db):
        vehicle = make_vehicle(status=VehicleStatus.MAINTENANCE)
        db.add(vehicle)
        db.commit()
        assert vehicle.status == VehicleStatus.MAINTENANCE

    def test_first_save_stamps_equal_timestamps(self, db):
        created = datetime(2024, 1, 1, 9, 0, 0)
        with patch("app.models.lifecycle.utcnow", return_value=created) as clock:
            vehicle = make_vehicle()
            db.add(vehicle)
            db.commit()
            assert clock.call_count == 1

        assert vehicle.created_at == created
        assert vehicle.updated_at == created

    def test_later_save_advances_updated_at_only(self, db):
        created = datetime(2024, 1, 1, 9, 0, 0)
        later = datetime(2024, 1, 2, 17, 30, 0)
        with patch("app.models.lifecycle.utcnow", return_value=created):
            vehicle = make_vehicle()
            db.add(vehicle)
            db.commit()

        with patch("app.models.lifecycle.utcnow", return_value=later) as clock:
            vehicle.mileage = 15500
            db.commit()
            assert clock.call_count == 1

        assert vehicle.created_at == created
        assert vehicle.updated_at == later

    def test_save_without_changes_keeps_updated_at(self, db):
        created = datetime(2024, 1, 1, 9, 0, 0)
        with patch("app.models.lifecycle.utcnow", return_value=created):
            vehicle = make_vehicle()
            db.add(vehicle)
            db.commit()

        with patch("app.models.lifecycle.utcnow", return_value=datetime(2024, 2, 1)) as clock:
            db.commit()
            clock.assert_not_called()
        assert vehicle.updated_at == created


class TestConstraints:
    def test_duplicate_registration_number_rejected(self, db):
        db.add(make_vehicle(registration_number="DUP-1"))
        db.commit()
        db.add(make_vehicle(registration_number="DUP-1"))
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()

    def test_missing_vin_numbers_do_not_collide(self, db):
        db.add(make_vehicle(registration_number="A-1", vin_number=None))
        db.add(make_vehicle(registration_number="A-2", vin_number=None))
        db.commit()
        assert db.query(Vehicle).count() == 2

    def test_duplicate_vin_rejected(self, db):
        db.add(make_vehicle(registration_number="A-1", vin_number="1HGCM82633A004352"))
        db.commit()
        db.add(make_vehicle(registration_number="A-2", vin_number="1HGCM82633A004352"))
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()

    def test_deleting_vehicle_deletes_its_rentals(self, db):
        customer, vehicle = make_customer(), make_vehicle()
        db.add_all([
            make_rental(rental_number="R-1", customer=customer, vehicle=vehicle),
            make_rental(rental_number="R-2", customer=customer, vehicle=vehicle),
        ])
        db.commit()
        assert db.query(Rental).count() == 2

        db.delete(vehicle)
        db.commit()
        assert db.query(Rental).count() == 0
