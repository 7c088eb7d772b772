import arbor

KEYS = [10, 20, 5, 6, 12, 30, 7, 17]

tree = arbor.BTree(minimum_degree=2)

for key in KEYS:
    tree.insert(key)
    print(f"\n--- Inserting: {key} ---")
    print(arbor.to_ascii(tree))

print()
print(arbor.to_text(tree))
print(arbor.to_mermaid(tree))
print(arbor.to_json(tree).decode())
