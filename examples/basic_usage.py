"""
Basic ClearTools usage example.

This example demonstrates the fundamental ClearTools operations:
- Declaring a connection string type
- Parsing and serializing
- Custom parsing options
- Loading from configuration
"""

from dataclasses import dataclass
from typing import Optional

from cleartools import (
    ChainedSecretProvider,
    ClearToolsError,
    ConnectionStringBase,
    EnvironmentSecretProvider,
    MappingSecretProvider,
    ParsingOptions,
    SqlServerConnectionString,
    connection_key,
    load_connection_string,
)


@dataclass
class MyConnectionString(ConnectionStringBase):
    server: Optional[str] = connection_key("Server", required=True)
    port: Optional[int] = connection_key("Port")
    database: Optional[str] = connection_key("Database")


def basic_example():
    """Demonstrate basic ClearTools usage"""
    print("Basic ClearTools Example")
    print("=" * 30)

    # 1. Parse a custom connection string type
    conn = MyConnectionString.parse("Server=localhost;Port=5432;Database=mydb")
    print(f"✓ Parsed: server={conn.server} port={conn.port} database={conn.database}")

    # 2. Serialize it back
    print(f"✓ Serialized: {conn.to_string()}")

    # 3. Values containing the delimiter are escaped
    escaped = MyConnectionString.parse(r"Server=my\;server;Port=1433")
    print(f"✓ Escaped value: {escaped.server!r} -> {escaped.to_string()}")

    # 4. Custom delimiter
    options = ParsingOptions(delimiter="|")
    piped = MyConnectionString.parse("Server=db|Port=5432", options)
    print(f"✓ Custom delimiter: {piped.to_string()}")

    # 5. Errors carry the key and field involved
    try:
        MyConnectionString.parse("Port=5432")
    except ClearToolsError as e:
        print(f"✓ Expected error: {e}")

    # 6. Load a built-in type from configuration, environment first
    provider = ChainedSecretProvider(
        EnvironmentSecretProvider(),
        MappingSecretProvider({
            "ConnectionStrings": {
                "MyDatabase": "Server=localhost;Database=MyDb;User Id=sa;Password=mypass",
            },
        }),
    )
    sql = load_connection_string(SqlServerConnectionString, provider, "ConnectionStrings:MyDatabase")
    print(f"✓ Loaded SQL Server connection for database: {sql.database}")


if __name__ == "__main__":
    basic_example()
