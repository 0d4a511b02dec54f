import pytest

from adventkit.y2023_day05 import (
    Almanac,
    MapEntry,
    convert_number,
    convert_range,
    lowest_location,
    lowest_location_from_ranges,
    main,
    parse_almanac,
)

EXAMPLE = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""


@pytest.fixture
def almanac():
    return parse_almanac(EXAMPLE)


def test_parse_seeds_and_maps(almanac):
    assert almanac.seeds == (79, 14, 55, 13)
    assert len(almanac.maps) == 7
    assert almanac.maps[0] == (MapEntry(50, 98, 2), MapEntry(52, 50, 48))


def test_lowest_location_example(almanac):
    assert lowest_location(almanac) == 35


def test_lowest_location_from_ranges_example(almanac):
    assert lowest_location_from_ranges(almanac) == 46


def test_convert_number_outside_every_entry_is_unchanged():
    entries = [MapEntry(50, 98, 2), MapEntry(52, 50, 48)]
    assert convert_number(10, entries) == 10


def test_convert_number_uses_entry_offset():
    entry = MapEntry(50, 98, 2)
    assert convert_number(98, [entry]) == entry.destination


@pytest.mark.parametrize("start,length", [(79, 14), (55, 13), (0, 100), (45, 10), (97, 5)])
def test_convert_range_matches_pointwise_conversion(almanac, start, length):
    for entries in almanac.maps:
        pieces = convert_range(start, length, entries)
        assert sum(size for _, size in pieces) == length
        image = {convert_number(x, entries) for x in range(start, start + length)}
        covered = {v for s, size in pieces for v in range(s, s + size)}
        assert covered == image


def test_convert_range_with_no_entries_is_identity():
    assert convert_range(5, 3, []) == [(5, 3)]


def test_ranges_of_length_one_agree_with_single_seeds(almanac):
    seeds = almanac.seeds
    single = Almanac(tuple(v for seed in seeds for v in (seed, 1)), almanac.maps)
    assert lowest_location_from_ranges(single) == lowest_location(almanac)


def test_missing_seed_header_is_an_error():
    with pytest.raises(ValueError):
        parse_almanac("no seeds here\n")


def test_bad_entry_is_an_error():
    with pytest.raises(ValueError):
        parse_almanac("seeds: 1 2\n\nmap:\n1 2\n")


def test_no_seeds_is_an_error():
    with pytest.raises(ValueError):
        lowest_location(Almanac((), ()))


def test_main_reports_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1