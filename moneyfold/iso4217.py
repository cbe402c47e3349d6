"""Built-in table of ISO 4217 currencies with their display rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencySpec:
    """Static description of a currency.

    ``numeric_code`` is empty for currencies without an ISO numeric code.
    In ``template``, ``1`` stands for the number and ``$`` for the symbol.
    """

    code: str
    numeric_code: str
    fraction: int
    grapheme: str
    template: str
    decimal: str
    thousand: str


def _spec(
    code: str,
    numeric_code: str,
    fraction: int,
    grapheme: str,
    template: str,
    decimal: str = ".",
    thousand: str = ",",
) -> CurrencySpec:
    return CurrencySpec(
        code=code,
        numeric_code=numeric_code,
        fraction=fraction,
        grapheme=grapheme,
        template=template,
        decimal=decimal,
        thousand=thousand,
    )


_SPECS: tuple[CurrencySpec, ...] = (
    _spec("AED", "784", 2, ".\u062f.\u0625", "1 $"),
    _spec("AFN", "971", 2, "\u060b", "1 $"),
    _spec("ALL", "008", 2, "L", "$1"),
    _spec("AMD", "051", 2, "\u0564\u0580.", "1 $"),
    _spec("ANG", "532", 2, "\u0192", "$1", decimal=",", thousand="."),
    _spec("AOA", "973", 2, "Kz", "1$"),
    _spec("ARS", "032", 2, "$", "$1", decimal=",", thousand="."),
    _spec("AUD", "036", 2, "A$", "$1"),
    _spec("AWG", "533", 2, "\u0192", "1$"),
    _spec("AZN", "944", 2, "\u20bc", "$1"),
    _spec("BAM", "977", 2, "KM", "$1"),
    _spec("BBD", "052", 2, "$", "$1"),
    _spec("BDT", "050", 2, "\u09f3", "$1"),
    _spec("BGN", "975", 2, "\u043b\u0432", "$1"),
    _spec("BHD", "048", 3, ".\u062f.\u0628", "1 $"),
    _spec("BIF", "108", 0, "Fr", "1$"),
    _spec("BMD", "060", 2, "$", "$1"),
    _spec("BND", "096", 2, "$", "$1"),
    _spec("BOB", "068", 2, "Bs.", "$1"),
    _spec("BRL", "986", 2, "R$", "$1", decimal=",", thousand="."),
    _spec("BSD", "044", 2, "$", "$1"),
    _spec("BTN", "064", 2, "Nu.", "1$"),
    _spec("BWP", "072", 2, "P", "$1"),
    _spec("BYN", "933", 2, "p.", "1 $", decimal=",", thousand=" "),
    _spec("BYR", "", 0, "p.", "1 $", decimal=",", thousand=" "),
    _spec("BZD", "084", 2, "BZ$", "$1"),
    _spec("CAD", "124", 2, "$", "$1"),
    _spec("CDF", "976", 2, "FC", "1$"),
    _spec("CHF", "756", 2, "CHF", "1 $"),
    _spec("CLF", "990", 4, "UF", "$1", decimal=",", thousand="."),
    _spec("CLP", "152", 0, "$", "$1", decimal=",", thousand="."),
    _spec("CNY", "156", 2, "\u5143", "1 $"),
    _spec("COP", "170", 2, "$", "$1", decimal=",", thousand="."),
    _spec("CRC", "188", 2, "\u20a1", "$1"),
    _spec("CUC", "931", 2, "$", "1$"),
    _spec("CUP", "192", 2, "$MN", "$1"),
    _spec("CVE", "132", 2, "$", "1$"),
    _spec("CZK", "203", 2, "K\u010d", "1 $"),
    _spec("DJF", "262", 0, "Fdj", "1 $"),
    _spec("DKK", "208", 2, "kr", "$ 1", decimal=",", thousand="."),
    _spec("DOP", "214", 2, "RD$", "$1"),
    _spec("DZD", "012", 2, ".\u062f.\u062c", "1 $"),
    _spec("EEK", "", 2, "kr", "$1"),
    _spec("EGP", "818", 2, "\u00a3", "$1"),
    _spec("ERN", "232", 2, "Nfk", "1 $"),
    _spec("ETB", "230", 2, "Br", "1 $"),
    _spec("EUR", "978", 2, "\u20ac", "$1"),
    _spec("FJD", "242", 2, "$", "$1"),
    _spec("FKP", "238", 2, "\u00a3", "$1"),
    _spec("GBP", "826", 2, "\u00a3", "$1"),
    _spec("GEL", "981", 2, "\u10da", "1 $"),
    _spec("GGP", "", 2, "\u00a3", "$1"),
    _spec("GHC", "", 2, "\u00a2", "$1"),
    _spec("GHS", "936", 2, "\u20b5", "$1"),
    _spec("GIP", "292", 2, "\u00a3", "$1"),
    _spec("GMD", "270", 2, "D", "1 $"),
    _spec("GNF", "324", 0, "FG", "1 $"),
    _spec("GTQ", "320", 2, "Q", "$1"),
    _spec("GYD", "328", 2, "$", "$1"),
    _spec("HKD", "344", 2, "HK$", "$1"),
    _spec("HNL", "340", 2, "L", "$1"),
    _spec("HRK", "191", 2, "kn", "1 $", decimal=",", thousand="."),
    _spec("HTG", "332", 2, "G", "1 $", decimal=",", thousand="."),
    _spec("HUF", "348", 2, "Ft", "1 $", decimal=",", thousand="."),
    _spec("IDR", "360", 2, "Rp", "$1", decimal=",", thousand="."),
    _spec("ILS", "376", 2, "\u20aa", "$1"),
    _spec("IMP", "", 2, "\u00a3", "$1"),
    _spec("INR", "356", 2, "\u20b9", "$1"),
    _spec("IQD", "368", 3, ".\u062f.\u0639", "1 $"),
    _spec("IRR", "364", 2, "\ufdfc", "1 $"),
    _spec("ISK", "352", 0, "kr", "$1", decimal=",", thousand="."),
    _spec("JEP", "", 2, "\u00a3", "$1"),
    _spec("JMD", "388", 2, "J$", "$1"),
    _spec("JOD", "400", 3, ".\u062f.\u0625", "1 $"),
    _spec("JPY", "392", 0, "\u00a5", "$1"),
    _spec("KES", "404", 2, "KSh", "$1"),
    _spec("KGS", "417", 2, "\u0441\u043e\u043c", "1 $"),
    _spec("KHR", "116", 2, "\u17db", "$1"),
    _spec("KMF", "174", 0, "CF", "$1"),
    _spec("KPW", "408", 2, "\u20a9", "$1"),
    _spec("KRW", "410", 0, "\u20a9", "$1"),
    _spec("KWD", "414", 3, ".\u062f.\u0643", "1 $"),
    _spec("KYD", "136", 2, "$", "$1"),
    _spec("KZT", "398", 2, "\u20b8", "$1"),
    _spec("LAK", "418", 2, "\u20ad", "$1"),
    _spec("LBP", "422", 2, "\u00a3", "$1"),
    _spec("LKR", "144", 2, "\u20a8", "$1"),
    _spec("LRD", "430", 2, "$", "$1"),
    _spec("LSL", "426", 2, "L", "$1"),
    _spec("LTL", "", 2, "Lt", "$1"),
    _spec("LVL", "", 2, "Ls", "1 $"),
    _spec("LYD", "434", 3, ".\u062f.\u0644", "1 $"),
    _spec("MAD", "504", 2, ".\u062f.\u0645", "1 $"),
    _spec("MDL", "498", 2, "lei", "1 $"),
    _spec("MGA", "969", 2, "Ar", "1$"),
    _spec("MKD", "807", 2, "\u0434\u0435\u043d", "$1"),
    _spec("MMK", "104", 2, "K", "$1"),
    _spec("MNT", "496", 2, "\u20ae", "$1"),
    _spec("MOP", "446", 2, "P", "1 $"),
    _spec("MRU", "929", 2, "UM", "$1"),
    _spec("MUR", "480", 2, "\u20a8", "$1"),
    _spec("MVR", "462", 2, "MVR", "1 $"),
    _spec("MWK", "454", 2, "MK", "$1"),
    _spec("MXN", "484", 2, "$", "$1"),
    _spec("MYR", "458", 2, "RM", "$1"),
    _spec("MZN", "943", 2, "MT", "$1"),
    _spec("NAD", "516", 2, "$", "$1"),
    _spec("NGN", "566", 2, "\u20a6", "$1"),
    _spec("NIO", "558", 2, "C$", "$1"),
    _spec("NOK", "578", 2, "kr", "1 $"),
    _spec("NPR", "524", 2, "\u20a8", "$1"),
    _spec("NZD", "554", 2, "$", "$1"),
    _spec("OMR", "512", 3, "\ufdfc", "1 $"),
    _spec("PAB", "590", 2, "B/.", "$1"),
    _spec("PEN", "604", 2, "S/", "$1"),
    _spec("PGK", "598", 2, "K", "1 $"),
    _spec("PHP", "608", 2, "\u20b1", "$1"),
    _spec("PKR", "586", 2, "\u20a8", "$1"),
    _spec("PLN", "985", 2, "z\u0142", "1 $"),
    _spec("PYG", "600", 0, "Gs", "1$"),
    _spec("QAR", "634", 2, "\ufdfc", "1 $"),
    _spec("RON", "946", 2, "lei", "$1"),
    _spec("RSD", "941", 2, "\u0414\u0438\u043d.", "$1"),
    _spec("RUB", "643", 2, "\u20bd", "1 $"),
    _spec("RUR", "", 2, "\u20bd", "1 $"),
    _spec("RWF", "646", 0, "FRw", "1 $"),
    _spec("SAR", "682", 2, "\ufdfc", "1 $"),
    _spec("SBD", "090", 2, "$", "$1"),
    _spec("SCR", "690", 2, "\u20a8", "$1"),
    _spec("SDG", "938", 2, "\u00a3", "$1"),
    _spec("SEK", "752", 2, "kr", "1 $"),
    _spec("SGD", "702", 2, "S$", "$1"),
    _spec("SHP", "654", 2, "\u00a3", "$1"),
    _spec("SKK", "", 2, "Sk", "$1"),
    _spec("SLE", "925", 2, "Le", "1 $"),
    _spec("SLL", "694", 2, "Le", "1 $"),
    _spec("SOS", "706", 2, "Sh", "1 $"),
    _spec("SRD", "968", 2, "$", "$1"),
    _spec("SSP", "728", 2, "\u00a3", "1 $"),
    _spec("STD", "", 2, "Db", "1 $"),
    _spec("STN", "930", 2, "Db", "1 $"),
    _spec("SVC", "222", 2, "\u20a1", "$1"),
    _spec("SYP", "760", 2, "\u00a3", "1 $"),
    _spec("SZL", "748", 2, "\u00a3", "$1"),
    _spec("THB", "764", 2, "\u0e3f", "$1"),
    _spec("TJS", "972", 2, "SM", "1 $"),
    _spec("TMT", "934", 2, "T", "1 $"),
    _spec("TND", "788", 3, ".\u062f.\u062a", "1 $"),
    _spec("TOP", "776", 2, "T$", "$1"),
    _spec("TRL", "", 2, "\u20a4", "$1"),
    _spec("TRY", "949", 2, "\u20ba", "$1"),
    _spec("TTD", "780", 2, "TT$", "$1"),
    _spec("TWD", "901", 2, "NT$", "$1"),
    _spec("TZS", "834", 2, "TSh", "$1"),
    _spec("UAH", "980", 2, "\u20b4", "1 $"),
    _spec("UGX", "800", 0, "USh", "1 $"),
    _spec("USD", "840", 2, "$", "$1"),
    _spec("UYU", "858", 2, "$U", "$1"),
    _spec("UZS", "860", 2, "so\u2019m", "$1"),
    _spec("VEF", "937", 2, "Bs", "$1"),
    _spec("VES", "928", 2, "Bs.S", "$1"),
    _spec("VND", "704", 0, "\u20ab", "1 $"),
    _spec("VUV", "548", 0, "Vt", "$1"),
    _spec("WST", "882", 2, "T", "1 $"),
    _spec("XAF", "950", 0, "Fr", "1 $"),
    _spec("XAG", "961", 0, "oz t", "1 $"),
    _spec("XAU", "959", 0, "oz t", "1 $"),
    _spec("XCD", "951", 2, "$", "$1"),
    _spec("XCG", "532", 2, "Cg", "$1", decimal=",", thousand="."),
    _spec("XDR", "960", 0, "SDR", "1 $"),
    _spec("XOF", "952", 0, "CFA", "1 $"),
    _spec("XPF", "953", 0, "\u20a3", "1 $"),
    _spec("YER", "886", 2, "\ufdfc", "1 $"),
    _spec("ZAR", "710", 2, "R", "$1"),
    _spec("ZMW", "967", 2, "ZK", "$1"),
    _spec("ZWD", "716", 2, "Z$", "$1"),
    _spec("ZWL", "932", 2, "Z$", "$1"),
)


def builtin_currencies() -> dict[str, CurrencySpec]:
    """Return a new mapping of currency code to its built-in specification."""
    return {spec.code: spec for spec in _SPECS}