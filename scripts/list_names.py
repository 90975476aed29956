# Script to list the file names recorded in a .DS_Store, one per line
# duplicates are collapsed, order follows the file

import sys

from dsstore import DSStore

with open(sys.argv[1], "rb") as fh:
    store = DSStore(fh)

seen = set()
for node in store.root.children:
    if node.name in seen:
        continue
    seen.add(node.name)
    print(node.name)
