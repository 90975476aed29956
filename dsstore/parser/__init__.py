from dsstore.parser.tree import Node, TreeBuilder, parse
from dsstore.parser.index import AllocationEntry, IndexResolver, resolve
