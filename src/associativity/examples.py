"""
Example associations table used by the demo and the tests.

The theme links four kinds of things that can be "broken": bread, a code,
a record and a heart, all leading to the final answer "break".
"""
from associativity.model import AssociationsTable
from associativity.validator import read_associations_table_string


EXAMPLE_TABLE_CSV = """\
1, 1, 1, 1, 0
crust,   password, vinyl,    valentine,
loaf,    key,     album,    beat,
slice,   enigma,  track,    "cardiac, muscle",
dough,   morse,   gramophone, \\'sweetheart\\',
bread,   code,    record,   heart,   break
baguette, cryptogram, disc, ,        crack
, cypher, LP, ,
"""


def build_example_table() -> AssociationsTable:
    return read_associations_table_string(EXAMPLE_TABLE_CSV, origin="example")
