import pandas as pd

from core.comparison import ComparisonEntry, assemble, comparison_frame
from core.comparison_visualizer import ComparisonVisualizer


def test_assemble_union_with_missing_side():
    entries = assemble({"A": {"Messages Sent": 12}}, {"B": {"Messages Sent": 15}})

    assert entries == [
        ComparisonEntry("A", {"Messages Sent": 12}, None),
        ComparisonEntry("B", None, {"Messages Sent": 15}),
    ]


def test_assemble_order_old_first_then_new_only():
    old = {"Zed": {}, "Amy": {}}
    new = {"Bea": {}, "Amy": {}, "Cas": {}}

    names = [e.name for e in assemble(old, new)]

    assert names == ["Zed", "Amy", "Bea", "Cas"]


def test_to_dict_uses_period_labels():
    entry = ComparisonEntry("A", {"Messages Sent": 12}, None)
    assert entry.to_dict() == {
        "Name": "A",
        "Oude Data": {"Messages Sent": 12},
        "Nieuwe Data": None,
    }


def test_comparison_frame_change_column():
    entries = [
        ComparisonEntry("A", {"Messages Sent": 10}, {"Messages Sent": 14}),
        ComparisonEntry("B", None, {"Messages Sent": 20}),
    ]

    frame = comparison_frame(entries)
    a_row = frame[(frame["Name"] == "A") & (frame["Metric"] == "Messages Sent")].iloc[0]
    b_row = frame[(frame["Name"] == "B") & (frame["Metric"] == "Messages Sent")].iloc[0]

    assert a_row["Change"] == 4
    assert b_row["New"] == 20
    assert pd.isna(b_row["Old"])


def test_comparison_frame_empty():
    frame = comparison_frame([])
    assert frame.empty
    assert list(frame.columns) == ["Name", "Metric", "Old", "New", "Change"]


def test_metric_chart():
    entries = [
        ComparisonEntry("A", {"Messages Sent": 10}, {"Messages Sent": 14}),
        ComparisonEntry("B", None, {"Messages Sent": 20}),
    ]

    fig = ComparisonVisualizer(entries).metric_chart()

    assert [trace.name for trace in fig.data] == ["Oude Data", "Nieuwe Data"]
    assert list(fig.data[1].y) == [14, 20]
    assert ComparisonVisualizer([]).metric_chart() is None
