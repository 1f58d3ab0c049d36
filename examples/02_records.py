"""
Example 02: Records

This example demonstrates converting query results to dynamic records and dicts.
"""

import sqlite3

from table_mapper import DuplicateKeyError, ResultTable
from table_mapper import is_empty, to_dict, to_dict_list, to_dynamic, to_dynamic_list


def main():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE tags (id INTEGER PRIMARY KEY, label TEXT, color TEXT)")
    conn.executemany(
        "INSERT INTO tags (label, color) VALUES (?, ?)",
        [("urgent", "red"), ("later", None), ("done", "green")],
    )
    conn.commit()

    print("=== Records ===\n")

    table = ResultTable.from_cursor(conn.execute("SELECT * FROM tags ORDER BY id"))

    print("1. Dynamic records:")
    for tag in to_dynamic_list(table):
        print(f"   - {tag.label}: {tag.color}")
    print()

    print("2. Dicts:")
    for row in to_dict_list(table):
        print(f"   - {row}")
    print()

    print("3. Single row:")
    table = ResultTable.from_cursor(conn.execute("SELECT * FROM tags WHERE id = 2"))
    print(f"   {to_dict(table)}\n")

    print("4. Empty result:")
    table = ResultTable.from_cursor(conn.execute("SELECT * FROM tags WHERE id = 99"))
    print(f"   is_empty={is_empty(table)} record={to_dynamic(table)}\n")

    print("5. Duplicate column names:")
    table = ResultTable.from_cursor(conn.execute("SELECT label AS x, color AS x FROM tags LIMIT 1"))
    print(f"   dynamic: {to_dynamic(table)}")
    try:
        to_dict(table)
    except DuplicateKeyError as e:
        print(f"   dict: {e}")

    conn.close()


if __name__ == "__main__":
    main()
