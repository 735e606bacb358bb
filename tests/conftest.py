import datetime as dt
import io

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook

from sheetdash.main import create_app


SALES_CSV = (
    b"OrderDate,TotalDue,SubTotal,Territory,Status\n"
    b"2024-01-01,100,90,North,Shipped\n"
    b"2024-01-01,50,45,South,Pending\n"
    b"2024-01-02,25,20,North,Shipped\n"
)


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def sales_csv() -> bytes:
    return SALES_CSV


@pytest.fixture
def sales_xlsx() -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Orders"
    ws.append(["OrderDate", "TotalDue", "Territory", "Rush"])
    ws.append([dt.datetime(2024, 1, 1), 10, "North", True])
    ws.append([dt.datetime(2024, 1, 2, 13, 30), 5.5, None, False])
    other = wb.create_sheet("Ignored")
    other.append(["Something", "Else"])
    other.append([1, 2])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
