"""Quick tour of utilkit, run as a smoke test.

Usage:
    python examples/demo.py
"""

import datetime

from utilkit import ManualScheduler, debounce, deep_clone, format_date, group_by, random_id, slugify

assert slugify("Hello World!") == "hello-world", "slugify failed"
assert len(random_id(5)) == 5, "random_id length mismatch"
assert format_date(datetime.date(2026, 2, 10), "DD/MM/YYYY") == "10/02/2026", "format_date failed"

original = {"a": 1, "b": {"c": 2}}
cloned = deep_clone(original)
cloned["b"]["c"] = 999
assert original["b"]["c"] == 2 and cloned["b"]["c"] == 999, "deep_clone failed"

groups = group_by([{"cat": "A"}, {"cat": "B"}, {"cat": "A"}], "cat")
assert [len(groups["A"]), len(groups["B"])] == [2, 1], "group_by failed"

saved = []
scheduler = ManualScheduler()
save = debounce(saved.append, delay=300, scheduler=scheduler)
for draft in ("d", "dr", "draft"):
    save(draft)
scheduler.advance(0.3)
assert saved == ["draft"], "debounce failed"

print("All checks passed!")
