"""
Example 01: Model Mapping

This example demonstrates mapping SQLite query results to dataclasses and Pydantic models.
"""

import sqlite3
from dataclasses import dataclass

from pydantic import BaseModel

from table_mapper import MapperConfig, MissingColumnPolicy, ModelMapper, ResultTable
from table_mapper import to_object, to_objects


@dataclass
class UserDataclass:
    """User model using dataclass"""
    id: int
    name: str
    email: str
    active: bool


class UserPydantic(BaseModel):
    """User model using Pydantic"""
    id: int
    name: str
    email: str
    active: bool = True


def main():
    conn = sqlite3.connect(":memory:")
    conn.execute("""
        CREATE TABLE users (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            active INTEGER DEFAULT 1
        )
    """)
    conn.execute("INSERT INTO users (name, email) VALUES ('Alice', 'alice@example.com')")
    conn.execute("INSERT INTO users (name, email) VALUES ('Bob', 'bob@example.com')")
    conn.commit()

    print("=== Model Mapping ===\n")

    # Map the first row to a dataclass
    print("1. Dataclass Mapping:")
    table = ResultTable.from_cursor(conn.execute("SELECT * FROM users ORDER BY id"))
    user = to_object(table, UserDataclass)
    print(f"   Type: {type(user).__name__}")
    print(f"   Data: {user}")
    print(f"   Access: user.active = {user.active}\n")

    # Map every row to a Pydantic model
    print("2. Pydantic Model Mapping:")
    users = to_objects(table, UserPydantic)
    print(f"   Count: {len(users)} users")
    for u in users:
        print(f"   - {u.name}: {u.email} (active={u.active})")
    print()

    # Aliases and a strict missing-column policy
    print("3. Aliases:")
    table = ResultTable.from_cursor(
        conn.execute("SELECT id AS user_id, name, email, active FROM users")
    )
    config = MapperConfig(missing_columns=MissingColumnPolicy.ERROR, aliases={"user_id": "id"})
    mapper = ModelMapper(UserPydantic, config)
    for u in mapper.map_many(table):
        print(f"   - #{u.id} {u.name}")

    conn.close()


if __name__ == "__main__":
    main()
