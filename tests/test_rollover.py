from astrochron.rollover import normalize_datetime
from astrochron.time import DateTimeFields


class TestNormalizeDatetime:
    def test_canonical_input_is_unchanged(self):
        fields, changed = normalize_datetime(2024, 3, 15, 12, 30, 45)
        assert not changed
        assert fields == DateTimeFields(2024, 3, 15, 12, 30, 45)

    def test_every_field_overflowing(self):
        fields, changed = normalize_datetime(2024, 13, 32, 25, 61, 61)
        assert changed
        assert fields == DateTimeFields(2025, 2, 2, 2, 2, 1)

    def test_second_carries_to_new_year(self):
        fields, changed = normalize_datetime(2024, 12, 31, 23, 59, 60)
        assert changed
        assert fields == DateTimeFields(2025, 1, 1, 0, 0, 0)

    def test_negative_second_borrows_into_leap_day(self):
        fields, changed = normalize_datetime(2024, 3, 1, 0, 0, -1)
        assert changed
        assert fields == DateTimeFields(2024, 2, 29, 23, 59, 59)

    def test_negative_hour(self):
        fields, _ = normalize_datetime(2024, 1, 1, -1, 0, 0)
        assert fields == DateTimeFields(2023, 12, 31, 23, 0, 0)

    def test_day_zero(self):
        fields, changed = normalize_datetime(2023, 1, 0, 0, 0, 0)
        assert changed
        assert fields == DateTimeFields(2022, 12, 31, 0, 0, 0)

    def test_month_zero(self):
        fields, changed = normalize_datetime(2024, 0, 15, 0, 0, 0)
        assert changed
        assert fields == DateTimeFields(2023, 12, 15, 0, 0, 0)

    def test_leap_day_in_common_year(self):
        fields, changed = normalize_datetime(2023, 2, 29, 0, 0, 0)
        assert changed
        assert fields == DateTimeFields(2023, 3, 1, 0, 0, 0)

    def test_julian_leap_day_is_kept(self):
        fields, changed = normalize_datetime(1500, 2, 29, 0, 0, 0)
        assert not changed
        assert fields == DateTimeFields(1500, 2, 29, 0, 0, 0)

    def test_fractional_second_is_kept(self):
        fields, changed = normalize_datetime(2024, 6, 1, 10, 0, 62.5)
        assert changed
        assert fields == DateTimeFields(2024, 6, 1, 10, 1, 2.5)


class TestReformGap:
    def test_gap_date_moves_to_october_15(self):
        fields, changed = normalize_datetime(1582, 10, 10, 8, 0, 0)
        assert changed
        assert fields == DateTimeFields(1582, 10, 15, 8, 0, 0)

    def test_carry_into_gap(self):
        fields, changed = normalize_datetime(1582, 10, 4, 24, 0, 0)
        assert changed
        assert fields == DateTimeFields(1582, 10, 15, 0, 0, 0)

    def test_gap_boundaries_are_valid(self):
        for day in (4, 15):
            fields, changed = normalize_datetime(1582, 10, day, 0, 0, 0)
            assert not changed
            assert fields.day == day
