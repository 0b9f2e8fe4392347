import pytest

from config.settings import METRIC_ORDER
from core.period_aggregator import PeriodAggregator
from conftest import records


@pytest.fixture
def aggregator():
    return PeriodAggregator()


def test_sums_pass_threshold(aggregator):
    df = records([
        {"Name": "A", "Messages Sent": 5},
        {"Name": "A", "Messages Sent": 6},
    ])

    result = aggregator.aggregate(df, {"A"})

    assert list(result) == ["A"]
    assert result["A"]["Messages Sent"] == 11
    assert isinstance(result["A"]["Messages Sent"], int)


def test_agent_below_threshold_is_dropped(aggregator):
    df = records([
        {"Name": "A", "Messages Sent": 5},
        {"Name": "A", "Messages Sent": 4},
    ])

    assert aggregator.aggregate(df, {"A"}) == {}


def test_bundle_has_every_metric_in_order(aggregator):
    df = records([{"Name": "A", "Messages Sent": 10}])

    bundle = aggregator.aggregate(df, {"A"})["A"]

    assert list(bundle) == METRIC_ORDER


def test_mean_without_values_is_zero(aggregator):
    df = records([{"Name": "A", "Messages Sent": 20}])

    bundle = aggregator.aggregate(df, {"A"})["A"]

    assert bundle["Avg First Response Time (ms)"] == 0
    # Missing column: every row is absent, which is one distinct value
    assert bundle["Unique Customers Messaged"] == 1
    assert "B" not in aggregator.aggregate(df, {"A", "B"})


def test_mean_skips_absent_and_text_cells(aggregator):
    df = records([
        {"Name": "A", "Messages Sent": 4, "Avg Conversation Handle Time (s)": 10},
        {"Name": "A", "Messages Sent": 4, "Avg Conversation Handle Time (s)": None},
        {"Name": "A", "Messages Sent": 4, "Avg Conversation Handle Time (s)": "n/a"},
        {"Name": "A", "Messages Sent": 4, "Avg Conversation Handle Time (s)": 20},
    ])

    bundle = aggregator.aggregate(df, {"A"})["A"]

    assert bundle["Avg Conversation Handle Time (s)"] == pytest.approx(15.0)
    assert bundle["Messages Sent"] == 16


def test_mean_is_unweighted_average_of_rows(aggregator):
    df = records([
        {"Name": "A", "Messages Sent": 100, "First Contact Resolution Rate": 0.9},
        {"Name": "A", "Messages Sent": 1, "First Contact Resolution Rate": 0.1},
    ])

    bundle = aggregator.aggregate(df, {"A"})["A"]

    assert bundle["First Contact Resolution Rate"] == pytest.approx(0.5)


def test_text_in_sum_column_counts_as_zero(aggregator):
    df = records([
        {"Name": "A", "Messages Sent": 12, "Conversations Marked Done": "x"},
        {"Name": "A", "Messages Sent": 1, "Conversations Marked Done": 3},
    ])

    bundle = aggregator.aggregate(df, {"A"})["A"]

    assert bundle["Conversations Marked Done"] == 3
    assert bundle["Messages Sent"] == 13


def test_unique_customers_counts_distinct_values(aggregator):
    df = records([
        {"Name": "A", "Messages Sent": 5, "Unique Customers Messaged": 7},
        {"Name": "A", "Messages Sent": 5, "Unique Customers Messaged": 7},
        {"Name": "A", "Messages Sent": 5, "Unique Customers Messaged": 3},
        {"Name": "A", "Messages Sent": 5, "Unique Customers Messaged": None},
    ])

    bundle = aggregator.aggregate(df, {"A"})["A"]

    assert bundle["Unique Customers Messaged"] == 3


def test_unselected_agents_never_appear(aggregator):
    df = records([
        {"Name": "A", "Messages Sent": 50},
        {"Name": "B", "Messages Sent": 50},
        {"Name": None, "Messages Sent": 50},
    ])

    result = aggregator.aggregate(df, {"B"})

    assert list(result) == ["B"]
    assert aggregator.aggregate(df, set()) == {}


def test_first_appearance_order_and_idempotence(aggregator):
    df = records([
        {"Name": "Zoe", "Messages Sent": 10},
        {"Name": "Adam", "Messages Sent": 10},
        {"Name": "Zoe", "Messages Sent": 1},
    ])
    selection = {"Zoe", "Adam"}

    first = aggregator.aggregate(df, selection)
    second = aggregator.aggregate(df, selection)

    assert list(first) == ["Zoe", "Adam"]
    assert first == second


def test_missing_columns_and_empty_input(aggregator):
    assert aggregator.aggregate(None, {"A"}) == {}
    assert aggregator.aggregate(records([]), {"A"}) == {}
    assert aggregator.aggregate(records([{"Agent": "A", "Messages Sent": 30}]), {"A"}) == {}
    # No "Messages Sent" column: sums to 0, below threshold
    assert aggregator.aggregate(records([{"Name": "A"}]), {"A"}) == {}


def test_custom_threshold():
    df = records([{"Name": "A", "Messages Sent": 3}])
    assert "A" in PeriodAggregator(min_messages_sent=3).aggregate(df, {"A"})


def test_parsed_csv_end_to_end(aggregator):
    from core.csv_parser import CSVParser

    df = CSVParser().parse(
        "Name,Messages Sent,Unique Customers Messaged,Avg First Response Time (ms)\n"
        "Alice,6,c1,100\n"
        "Alice,6,c2,\n"
        "Bob,3,c3,50\n"
    )

    result = aggregator.aggregate(df, {"Alice", "Bob"})

    assert list(result) == ["Alice"]
    assert result["Alice"]["Messages Sent"] == 12
    assert result["Alice"]["Unique Customers Messaged"] == 2
    assert result["Alice"]["Avg First Response Time (ms)"] == pytest.approx(100.0)


def test_empty_customer_cells_count_as_one_value(aggregator):
    from core.csv_parser import CSVParser

    parser = CSVParser()
    no_column = parser.parse("Name,Messages Sent\nA,12\n")
    with_blank = parser.parse(
        "Name,Messages Sent,Unique Customers Messaged\n"
        "A,6,3\n"
        "A,6,\n"
        "A,6,\n"
    )

    assert aggregator.aggregate(no_column, {"A"})["A"]["Unique Customers Messaged"] == 1
    assert aggregator.aggregate(with_blank, {"A"})["A"]["Unique Customers Messaged"] == 2
