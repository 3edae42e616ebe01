"""Build several independent fragments with one formatter."""

from linefold import create

orders = [
    {"id": "A-1", "item": "Lamp", "note": ""},
    {"id": "A-2", "item": "", "note": ""},
    {"id": "A-3", "item": "Desk", "note": "fragile"},
]

fmt = create(markup=True)
for order in orders:
    fmt.with_class("order").start_container()
    fmt.add_line(order["item"], "Item").add_line(order["note"], "Note")
    fmt.end_container().split()

for fragment in fmt.collect_fragments():
    print(fragment)

print(fmt.combine("\n<hr>\n"))
