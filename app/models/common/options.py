"""Options table - externally managed settings such as keyword quota."""

OPTIONS_DDL = """
CREATE TABLE IF NOT EXISTS options (
    name VARCHAR PRIMARY KEY,
    value JSON NOT NULL
)
"""
