import datetime as dt

from sheetdash.analytics.dashboard import analytics_view, dashboard_view
from sheetdash.analytics.tables import page_rows
from sheetdash.data.parser import parse
from sheetdash.data.schemas import FileKind
from sheetdash.data.store import DatasetStore


def _dataset(rows, columns=None):
    columns = columns or (list(rows[0]) if rows else [])
    return DatasetStore().create(
        name="orders.csv",
        uploaded_at=dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc),
        row_count=len(rows),
        column_count=len(columns),
        columns=columns,
        rows=rows,
    )


def test_dashboard_view(sales_csv):
    table = parse(sales_csv, FileKind.DELIMITED)
    view = dashboard_view(_dataset(table.rows, table.columns))

    assert view["metrics"] == {
        "totalSales": 330,
        "orderCount": 3,
        "avgOrderValue": 110.0,
        "topTerritory": "North",
    }
    assert view["charts"]["lineData"] == [
        {"name": "2024-01-01", "value": 100},
        {"name": "2024-01-01", "value": 50},
        {"name": "2024-01-02", "value": 25},
    ]
    assert view["charts"]["barData"] == [{"name": "North", "value": 125}, {"name": "South", "value": 50}]
    assert view["charts"]["pieData"] == [{"name": "Shipped", "value": 2}, {"name": "Pending", "value": 1}]


def test_dashboard_caps_and_truncates():
    rows = [{"Territory": f"Territory number {i}", "Status": f"S{i}", "TotalDue": i} for i in range(12)]
    charts = dashboard_view(_dataset(rows))["charts"]
    assert len(charts["lineData"]) == 10
    assert len(charts["barData"]) == 8
    assert charts["barData"][0]["name"] == "Territory numbe..."
    assert len(charts["pieData"]) == 5


def test_dashboard_on_rows_without_known_fields():
    view = dashboard_view(_dataset([{"Foo": "x"}, {"Foo": "y"}]))
    assert view["metrics"] == {"totalSales": 0, "orderCount": 2, "avgOrderValue": 0.0, "topTerritory": "N/A"}
    assert view["charts"]["lineData"] == [{"name": "Item 1", "value": 0}, {"name": "Item 2", "value": 0}]
    assert view["charts"]["barData"] == [{"name": "Unknown", "value": 2}]
    assert view["charts"]["pieData"] == [{"name": "Active", "value": 2}]


def test_analytics_view(sales_csv):
    table = parse(sales_csv, FileKind.DELIMITED)
    charts = analytics_view(_dataset(table.rows, table.columns))["charts"]

    assert charts["lineData"] == [{"name": "1/1/2024", "value": 150}, {"name": "1/2/2024", "value": 25}]
    assert charts["barData"] == [{"name": "North", "value": 125}, {"name": "South", "value": 50}]
    assert charts["territoryData"] == [{"name": "North", "value": 125}, {"name": "South", "value": 50}]
    assert charts["pieData"] == [{"name": "Shipped", "value": 2}, {"name": "Pending", "value": 1}]


def test_analytics_ranks_territories_and_defaults_category():
    rows = [{"Territory": name, "TotalDue": value} for name, value in
            [("Small", 1), ("Big", 100), ("A rather long territory label", 50)]]
    charts = analytics_view(_dataset(rows))["charts"]
    assert [p["name"] for p in charts["territoryData"]] == ["Big", "A rather long t...", "Small"]
    assert charts["barData"][2]["name"] == "A rather long territ..."
    assert charts["pieData"] == [{"name": "Other", "value": 3}]
    assert charts["lineData"] == []


def test_page_rows_search_and_paging():
    rows = [{"Name": f"Row {i}", "Region": "East" if i % 2 else "West"} for i in range(10)]
    dataset = _dataset(rows)

    page = page_rows(dataset, offset=8, limit=5)
    assert page["total"] == 10
    assert [r["Name"] for r in page["rows"]] == ["Row 8", "Row 9"]

    east = page_rows(dataset, search="EAST")
    assert east["total"] == 5
    assert east["columns"] == ["Name", "Region"]
    assert all(r["Region"] == "East" for r in east["rows"])
