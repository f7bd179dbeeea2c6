"""
Unit tests for the layout geometry model

Seat ids and labels are derived, never stored, so every consumer depends on
these functions producing exactly the same strings.
"""

import pytest

from src.service.seating.domain.enum.table_shape import ShapeFamily
from src.service.seating.domain.layout_geometry import (
    build_seat_lookup_map,
    default_seat_label,
    describe_seat_selection,
    header_labels_for,
    in_range_seat_labels,
    normalize_seat_labels,
    resolve_shape,
    seat_capacity_for,
    seat_count_of,
    seat_id_for,
    seat_ids_for,
    seat_label_for,
)


pytestmark = pytest.mark.unit


class TestSeatIds:
    def test_six_top_in_main_floor_row_a(self, make_element):
        # Given: a six-seat table in section "Main Floor", row "A"
        element = make_element(section_name='Main Floor', row_label='A', total_seats=6)

        # When
        seat_ids = seat_ids_for(element)

        # Then: one id per seat, 1-based
        assert seat_ids == [f'Main Floor-A-{n}' for n in range(1, 7)]

    def test_ids_are_unique_within_element(self, make_element):
        element = make_element(table_shape='round-8', total_seats=8)

        seat_ids = seat_ids_for(element)

        assert len(seat_ids) == len(set(seat_ids)) == 8

    def test_blank_section_and_row_fall_back_to_defaults(self, make_element):
        element = make_element(section_name='  ', row_label='')

        assert seat_id_for(element, 1) == 'Section-Row-1'

    def test_section_and_row_are_trimmed(self, make_element):
        element = make_element(section_name=' Balcony ', row_label=' C ')

        assert seat_id_for(element, 2) == 'Balcony-C-2'

    def test_non_seat_bearing_elements_have_no_seats(self, make_element):
        marker = make_element('m', element_type='marker')
        area = make_element('a', element_type='area')

        assert seat_count_of(marker) == 0
        assert seat_ids_for(area) == []

    def test_zero_seat_table_has_no_ids(self, make_element):
        element = make_element(total_seats=0)

        assert seat_ids_for(element) == []


class TestSeatLabels:
    def test_default_labels_follow_row_letters(self, make_element):
        element = make_element(row_label='A', total_seats=6)

        assert seat_label_for(element, 1) == 'AA'
        assert seat_label_for(element, 6) == 'AF'

    def test_override_wins_over_default(self, make_element):
        element = make_element(seat_labels={'2': 'VIP'})

        assert seat_label_for(element, 2) == 'VIP'
        assert seat_label_for(element, 3) == 'AC'

    def test_single_seat_uses_bare_row_label(self):
        assert default_seat_label('B', 1, 1) == 'B'

    def test_blank_row_uses_default_row_name(self):
        assert default_seat_label('', 1, 4) == 'RowA'

    @pytest.mark.parametrize(
        'seat_number,expected',
        [
            (26, 'AZ'),
            (27, 'AAA'),
            (28, 'ABB'),
            (52, 'AZZ'),
            (53, 'AAAA'),
        ],
    )
    def test_labels_beyond_twenty_six_repeat_the_letter(self, seat_number, expected):
        assert default_seat_label('A', seat_number, 60) == expected

    def test_labels_are_deterministic(self, make_element):
        element = make_element(total_seats=8, table_shape='table-8')

        first = [seat_label_for(element, n) for n in range(1, 9)]
        second = [seat_label_for(element, n) for n in range(1, 9)]

        assert first == second


class TestNormalizeSeatLabels:
    def test_json_text_is_parsed_and_trimmed(self):
        assert normalize_seat_labels('{"1": " VIP ", "2": ""}') == {'1': 'VIP'}

    def test_integer_keys_become_strings(self):
        assert normalize_seat_labels({1: 'Window', 2: None}) == {'1': 'Window'}

    @pytest.mark.parametrize('value', [None, '', 'not json', '["a"]', 42])
    def test_unusable_values_mean_no_overrides(self, value):
        assert normalize_seat_labels(value) == {}

    def test_out_of_range_keys_are_ignored(self, make_element):
        element = make_element(
            total_seats=4, table_shape='table-4', seat_labels={'1': 'a', '5': 'b', 'x': 'c'}
        )

        assert in_range_seat_labels(element) == {'1': 'a'}
        assert seat_label_for(element, 4) == 'AD'


class TestHeaderLabels:
    def test_multi_seat_table_shows_row_label(self, make_element):
        headers = header_labels_for(make_element(section_name=' Main Floor ', row_label=' A '))

        assert headers.section_label == 'Main Floor'
        assert headers.row_label == 'A'

    def test_single_seat_shows_first_seat_label(self, make_element):
        chair = make_element(
            element_type='chair', table_shape='chair', row_label='B', total_seats=1
        )

        assert header_labels_for(chair).row_label == 'B'

    def test_blank_row_shows_first_seat_label(self, make_element):
        element = make_element(row_label='', total_seats=6)

        assert header_labels_for(element).row_label == 'RowA'


class TestResolveShape:
    def test_known_shape(self):
        resolved = resolve_shape('round-8')

        assert resolved.name == 'round-8'
        assert resolved.family is ShapeFamily.ROUND
        assert resolved.capacity == 8
        assert resolved.is_fallback is False

    def test_legacy_alias(self):
        assert resolve_shape('table6').name == 'table-6'

    def test_standing_area_capacity_is_parsed(self):
        resolved = resolve_shape('standing-25')

        assert resolved.family is ShapeFamily.STANDING
        assert resolved.capacity == 25

    def test_standing_area_without_count_uses_default(self):
        assert resolve_shape('standing-x').capacity == 10

    def test_unknown_shape_falls_back_to_six_top(self):
        resolved = resolve_shape('hexagon')

        assert resolved.name == 'table-6'
        assert resolved.capacity == 6
        assert resolved.is_fallback is True

    @pytest.mark.parametrize(
        'shape,capacity',
        [('table-2', 2), ('table-4', 4), ('bar-6', 6), ('booth-4', 4), ('chair', 1)],
    )
    def test_canonical_capacity(self, shape, capacity):
        assert seat_capacity_for(shape) == capacity


class TestSeatLookup:
    def test_lookup_covers_every_seat_of_seat_bearing_elements(self, sample_document):
        lookup = build_seat_lookup_map(sample_document.elements)

        assert lookup['Main Floor-A-1'] == 'AA'
        assert lookup['Main Floor-B-1'] == 'B'
        assert 'Main Floor-Bar-1' not in lookup
        # table-a (6) + chair-b (1) + unplaced table-c (6)
        assert len(lookup) == 13

    def test_describe_selection_prefers_label(self):
        assert describe_seat_selection('Main Floor-A-1', 'AA') == 'AA (Main Floor-A-1)'

    def test_describe_selection_without_label(self):
        assert describe_seat_selection('Main Floor-A-1', None) == 'Main Floor-A-1'
        assert describe_seat_selection('Main Floor-A-1', 'Main Floor-A-1') == 'Main Floor-A-1'
