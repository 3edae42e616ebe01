"""Format a record as text and HTML; empty fields vanish with their labels."""

from linefold import FormatConfig, Formatter, KeyWithPrefix

customer = {
    "name": "Asha Rao",
    "mobile": "",
    "email": "asha@example.com",
    "city": "Pune",
    "pin": None,
    "balance": 0,
}

contact = [KeyWithPrefix("mobile", "M"), KeyWithPrefix("email", "E")]
place = [KeyWithPrefix("city", "City"), KeyWithPrefix("pin", "PIN")]

for config in (FormatConfig(), FormatConfig(markup=True)):
    fmt = Formatter(config)
    fmt.add_bold_line(customer["name"])
    fmt.add_inline_line(customer, contact)
    fmt.add_inline_line(customer, place, inline_delimiter=" | ")
    fmt.add_line(customer["balance"], "Balance")
    print(fmt)
    print()
