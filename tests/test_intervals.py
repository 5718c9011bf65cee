from producer_intervals.intervals import (
    analyze,
    compute_intervals,
    group_wins_by_producer,
    select_extremes,
)
from producer_intervals.models import AnalysisResult, IntervalRecord, WinningRecord


def wins(*pairs):
    return [WinningRecord(year=year, raw_producers=producers) for year, producers in pairs]


def interval(producer, previous_win, following_win):
    return IntervalRecord(
        producer=producer,
        interval=following_win - previous_win,
        previous_win=previous_win,
        following_win=following_win,
    )


def test_single_producer_two_wins_is_both_min_and_max():
    result = analyze(wins((1980, "John Doe"), (1985, "John Doe")))

    expected = [interval("John Doe", 1980, 1985)]
    assert result.min == expected
    assert result.max == expected


def test_fast_and_slow_producers():
    result = analyze(wins((1980, "Fast"), (1981, "Fast"), (1980, "Slow"), (1990, "Slow")))

    assert result.min == [interval("Fast", 1980, 1981)]
    assert result.max == [interval("Slow", 1980, 1990)]


def test_shared_win_counts_for_each_producer():
    result = analyze(
        wins(
            (1988, "Producer Alpha, Producer Beta"),
            (1993, "Producer Alpha"),
            (1994, "Producer Beta"),
        )
    )

    assert result.min == [interval("Alpha", 1988, 1993)]
    assert result.max == [interval("Beta", 1988, 1994)]


def test_empty_input():
    assert analyze([]) == AnalysisResult(min=[], max=[])
    assert analyze(None) == AnalysisResult(min=[], max=[])


def test_no_repeat_winners():
    result = analyze(wins((1980, "Allan Carr"), (1981, "Frank Yablans"), (1982, "Mitsuharu Ishii")))
    assert result.min == []
    assert result.max == []


def test_ties_are_all_returned_in_producer_order():
    result = analyze(
        wins(
            (2000, "Ann Lee"),
            (2002, "Ann Lee"),
            (2010, "Bob Ray"),
            (2012, "Bob Ray"),
            (1990, "Cy Young"),
            (2001, "Cy Young"),
            (1995, "Di Moss"),
            (2006, "Di Moss"),
        )
    )

    assert result.min == [interval("Ann Lee", 2000, 2002), interval("Bob Ray", 2010, 2012)]
    assert result.max == [interval("Cy Young", 1990, 2001), interval("Di Moss", 1995, 2006)]


def test_years_are_sorted_regardless_of_input_order():
    result = analyze(wins((2010, "Joel Silver"), (1990, "Joel Silver"), (1991, "Joel Silver")))

    assert result.min == [interval("Joel Silver", 1990, 1991)]
    assert result.max == [interval("Joel Silver", 1991, 2010)]


def test_records_without_producers_are_skipped():
    result = analyze(wins((1980, None), (1981, "   "), (1982, "Bo Derek"), (1988, "Bo Derek")))
    assert result.min == [interval("Bo Derek", 1982, 1988)]


def test_names_are_grouped_after_normalization_only():
    result = analyze(wins((1980, "Jon  Peters"), (1985, "Producer: Jon Peters"), (1990, "jon peters")))
    assert result.min == [interval("Jon Peters", 1980, 1985)]
    assert result.max == result.min


def test_same_year_twice_gives_zero_interval():
    result = analyze(wins((1986, "Gloria Katz"), (1986, "Gloria Katz"), (1990, "Gloria Katz")))

    assert result.min == [interval("Gloria Katz", 1986, 1986)]
    assert result.min[0].interval == 0
    assert result.max == [interval("Gloria Katz", 1986, 1990)]


def test_interval_properties_hold():
    records = wins(
        (1980, "Allan Carr & Bo Derek"),
        (1984, "Bo Derek"),
        (1990, "Bo Derek, Joel Silver"),
        (1991, "Joel Silver"),
        (2002, "Matthew Vaughn"),
        (2015, "Simon Kinberg, Matthew Vaughn and Hutch Parker"),
    )
    producer_wins = group_wins_by_producer(records)
    intervals = compute_intervals(producer_wins)
    result = analyze(records)

    assert len(intervals) == 4
    for record in intervals:
        assert record.following_win - record.previous_win == record.interval
        assert record.interval > 0

    values = [record.interval for record in intervals]
    assert all(record.interval == min(values) for record in result.min)
    assert all(record.interval == max(values) for record in result.max)
    assert result.min == [interval("Joel Silver", 1990, 1991)]
    assert result.max == [interval("Matthew Vaughn", 2002, 2015)]


def test_analyze_is_deterministic():
    records = wins((1980, "Fast"), (1981, "Fast"), (1980, "Slow"), (1990, "Slow"))
    assert analyze(records) == analyze(records)


def test_group_wins_keeps_first_appearance_order():
    producer_wins = group_wins_by_producer(wins((1990, "Bo Derek, Joel Silver"), (1984, "Bo Derek")))

    assert list(producer_wins) == ["Bo Derek", "Joel Silver"]
    assert producer_wins["Bo Derek"] == [1984, 1990]


def test_single_producer_single_win_yields_no_intervals():
    assert compute_intervals({"Allan Carr": [1980]}) == []
    assert select_extremes([]) == AnalysisResult(min=[], max=[])


def test_interval_record_serializes_with_wire_names():
    data = interval("John Doe", 1980, 1985).model_dump(by_alias=True)
    assert data == {"producer": "John Doe", "interval": 5, "previousWin": 1980, "followingWin": 1985}


def test_name_repeated_on_one_record_counts_once():
    result = analyze(wins((1980, "Jon Peters, Jon Peters"), (1985, "Jon Peters")))

    assert result.min == [interval("Jon Peters", 1980, 1985)]
    assert result.max == result.min
    assert group_wins_by_producer(wins((1980, "Jon Peters & Producer: Jon Peters"))) == {"Jon Peters": [1980]}


def test_non_ascii_whitespace_keeps_names_apart():
    result = analyze(wins((1980, "Jon\u00a0Peters"), (1985, "Jon Peters"), (1990, "Jon Peters")))

    assert result.min == [interval("Jon Peters", 1985, 1990)]
    assert result.max == result.min
