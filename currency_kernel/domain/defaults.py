"""
Built-in currency definitions seeded into every registry.

Only currencies whose ISO 4217 numeric code lies in [100, 999] can be
represented; codes such as AUD (036) or ARS (032) must be supplied with a
different numeric key through external configuration if needed.
Symbols are set only where they are unambiguous enough to be useful; the
rest fall back to the alpha code.
"""

from currency_kernel.domain.currency import CurrencyDefinition

BUILTIN_CURRENCIES: tuple[CurrencyDefinition, ...] = (
    # Major currencies
    CurrencyDefinition("USD", 840, "$"),
    CurrencyDefinition("EUR", 978, "€"),
    CurrencyDefinition("GBP", 826, "£"),
    CurrencyDefinition("JPY", 392, "¥", precision=0),
    CurrencyDefinition("CHF", 756),
    CurrencyDefinition("CAD", 124),
    CurrencyDefinition("NZD", 554),
    CurrencyDefinition("CNY", 156, "¥"),
    # Zero decimal currencies
    CurrencyDefinition("CLP", 152, precision=0),
    CurrencyDefinition("ISK", 352, precision=0),
    CurrencyDefinition("KRW", 410, "₩", precision=0),
    CurrencyDefinition("VND", 704, "₫", precision=0),
    CurrencyDefinition("XAF", 950, precision=0),
    CurrencyDefinition("XOF", 952, precision=0),
    # Three decimal currencies
    CurrencyDefinition("IQD", 368, precision=3),
    CurrencyDefinition("JOD", 400, precision=3),
    CurrencyDefinition("KWD", 414, precision=3),
    CurrencyDefinition("LYD", 434, precision=3),
    CurrencyDefinition("OMR", 512, precision=3),
    CurrencyDefinition("TND", 788, precision=3),
    # Two decimal currencies
    CurrencyDefinition("AED", 784),
    CurrencyDefinition("BGN", 975),
    CurrencyDefinition("BRL", 986, "R$"),
    CurrencyDefinition("COP", 170),
    CurrencyDefinition("CZK", 203),
    CurrencyDefinition("DKK", 208),
    CurrencyDefinition("EGP", 818),
    CurrencyDefinition("HKD", 344),
    CurrencyDefinition("HUF", 348),
    CurrencyDefinition("IDR", 360),
    CurrencyDefinition("ILS", 376, "₪"),
    CurrencyDefinition("INR", 356, "₹"),
    CurrencyDefinition("KES", 404),
    CurrencyDefinition("KZT", 398),
    CurrencyDefinition("LKR", 144),
    CurrencyDefinition("MAD", 504),
    CurrencyDefinition("MXN", 484),
    CurrencyDefinition("MYR", 458),
    CurrencyDefinition("NGN", 566, "₦"),
    CurrencyDefinition("NOK", 578),
    CurrencyDefinition("PEN", 604),
    CurrencyDefinition("PHP", 608, "₱"),
    CurrencyDefinition("PKR", 586),
    CurrencyDefinition("PLN", 985, "zł"),
    CurrencyDefinition("QAR", 634),
    CurrencyDefinition("RON", 946),
    CurrencyDefinition("RUB", 643, "₽"),
    CurrencyDefinition("SAR", 682),
    CurrencyDefinition("SEK", 752),
    CurrencyDefinition("SGD", 702),
    CurrencyDefinition("THB", 764, "฿"),
    CurrencyDefinition("TRY", 949, "₺"),
    CurrencyDefinition("TWD", 901),
    CurrencyDefinition("UAH", 980, "₴"),
    CurrencyDefinition("UYU", 858),
    CurrencyDefinition("ZAR", 710, "R"),
)
