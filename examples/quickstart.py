"""Quickstart example for pricelens.

This example demonstrates detecting prices in page markup and converting a
tagged price into a home currency.

Note: Examples use a fixed rate table. In production, rates come from a
RateTableProvider that fetches and caches them.
"""

from decimal import Decimal

from pricelens import classify, convert, format_price, parse_price, scan_document
from pricelens.conversion import RateTable, quote_conversion
from pricelens.html import parse_html, read_marker, to_html
from pricelens.providers import Settings, effective_rate_table

# Example 1: Classify a single candidate
print("=" * 50)
print("Example 1: Classify a Candidate")
print("=" * 50)

match = classify("₹1,234.56")
print(match.amount, match.currency_code)
# Output: 1234.56 INR

result, errors = parse_price("$0")
print(result, errors[0].diagnostic.format_error())
# Output: None error[PRICE_AMOUNT_NOT_POSITIVE]: Amount '0' in '$0' is not greater than zero
#           = help: ...

# Example 2: Scan a document
print("\n" + "=" * 50)
print("Example 2: Scan a Document")
print("=" * 50)

root = parse_html("""
<html><body>
  <p>Was Rs. 2,999, now only ₹1,499!</p>
  <span class="a-price"><span>€</span><span>19</span><span>.99</span></span>
  <script>var fake = "$5";</script>
</body></html>
""")
report = scan_document(root)
print(report)
# Output: ScanReport(structured_elements=1, text_runs=1, text_prices=2)
print(to_html(root.body))

# Example 3: Convert tagged prices
print("\n" + "=" * 50)
print("Example 3: Convert Tagged Prices")
print("=" * 50)

rates = RateTable({"INR": 83.2, "EUR": 0.92, "GBP": 0.79})
for element in root.xpath("//*[@data-price-detected='true']"):
    amount, currency = read_marker(element)
    quote = quote_conversion(amount, currency, "USD", rates)
    print(f"{quote.original} -> {quote.value}   [{quote.rate_line}]")
# Output: ₹2,999.00 INR -> $36.05   [1 USD = 83.20 INR (live)]

# Example 4: Manual rate override
print("\n" + "=" * 50)
print("Example 4: Manual Rate Override")
print("=" * 50)

settings = Settings(home_currency="INR", use_manual_rate=True, manual_rate=85.0)
table = effective_rate_table(settings, rates)
converted = convert(Decimal("20"), "USD", settings.home_currency, table)
print(format_price(converted, settings.home_currency))
# Output: ₹1,700.00
