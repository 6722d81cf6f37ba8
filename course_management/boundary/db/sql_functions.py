"""
Portable SQL functions.

substring_position(haystack, needle) returns the 1-based position of needle
in haystack, 0 when absent and NULL when either side is NULL. The match is
case-sensitive and treats every character literally on all backends.

Dependencies: sqlalchemy
System role: Dialect-specific SQL rendering for lesson search
"""

from sqlalchemy import Integer
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement


class substring_position(FunctionElement):
    """strpos() on PostgreSQL, instr() on SQLite."""

    type = Integer()
    name = "substring_position"
    inherit_cache = True


@compiles(substring_position)
def _compile_strpos(element, compiler, **kw):
    return "strpos(%s)" % compiler.process(element.clauses, **kw)


@compiles(substring_position, "sqlite")
def _compile_instr(element, compiler, **kw):
    return "instr(%s)" % compiler.process(element.clauses, **kw)
