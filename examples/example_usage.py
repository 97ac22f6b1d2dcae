from datetime import datetime

from sqlnest import InCondition, InsertMultipleValuesQuery, SqlText, and_, not_, or_
from sqlnest.core.conditions import equal_to, greater_than

where = and_(
    equal_to("orders.status", "shipped"),
    or_(greater_than("orders.total", 100), InCondition("orders.region", [])),
    not_(SqlText("orders.flagged")),
)
print(f"SELECT * FROM orders WHERE {where}")

signups = InsertMultipleValuesQuery("users").build(
    ["name", "signup_date"],
    [
        ["Ann", datetime(2020, 1, 1)],
        ["O'Brien", datetime(2020, 1, 2, 9, 30)],
        ["", None],
    ],
)
print(signups)
