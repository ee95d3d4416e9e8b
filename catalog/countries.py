"""
Country catalog for multi-country signals: display names, flags, FRED suffixes and the per-signal FRED series mapping.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Country:
    code: str
    name: str
    flag: str
    fred_suffix: Optional[str] = None
    is_default: bool = False


COUNTRIES: List[Country] = [
    # north america
    Country("US", "United States", "🇺🇸", fred_suffix="", is_default=True),
    Country("CA", "Canada", "🇨🇦", fred_suffix="CAN"),
    Country("MX", "Mexico", "🇲🇽", fred_suffix="MEX"),
    Country("PR", "Puerto Rico", "🇵🇷", fred_suffix="PRI"),
    Country("CU", "Cuba", "🇨🇺"),
    Country("DO", "Dominican Republic", "🇩🇴"),
    Country("PA", "Panama", "🇵🇦"),
    Country("CR", "Costa Rica", "🇨🇷"),
    # europe
    Country("GB", "United Kingdom", "🇬🇧", fred_suffix="GBR"),
    Country("DE", "Germany", "🇩🇪", fred_suffix="DEU"),
    Country("FR", "France", "🇫🇷", fred_suffix="FRA"),
    Country("IT", "Italy", "🇮🇹", fred_suffix="ITA"),
    Country("ES", "Spain", "🇪🇸", fred_suffix="ESP"),
    Country("NL", "Netherlands", "🇳🇱", fred_suffix="NLD"),
    Country("BE", "Belgium", "🇧🇪", fred_suffix="BEL"),
    Country("AT", "Austria", "🇦🇹", fred_suffix="AUT"),
    Country("CH", "Switzerland", "🇨🇭", fred_suffix="CHE"),
    Country("SE", "Sweden", "🇸🇪", fred_suffix="SWE"),
    Country("NO", "Norway", "🇳🇴", fred_suffix="NOR"),
    Country("DK", "Denmark", "🇩🇰", fred_suffix="DNK"),
    Country("FI", "Finland", "🇫🇮", fred_suffix="FIN"),
    Country("PL", "Poland", "🇵🇱", fred_suffix="POL"),
    Country("PT", "Portugal", "🇵🇹", fred_suffix="PRT"),
    Country("GR", "Greece", "🇬🇷", fred_suffix="GRC"),
    Country("IE", "Ireland", "🇮🇪", fred_suffix="IRL"),
    Country("CZ", "Czech Republic", "🇨🇿", fred_suffix="CZE"),
    Country("HU", "Hungary", "🇭🇺", fred_suffix="HUN"),
    Country("RO", "Romania", "🇷🇴"),
    Country("BG", "Bulgaria", "🇧🇬"),
    Country("HR", "Croatia", "🇭🇷"),
    Country("SK", "Slovakia", "🇸🇰"),
    Country("EE", "Estonia", "🇪🇪"),
    Country("LV", "Latvia", "🇱🇻"),
    Country("LT", "Lithuania", "🇱🇹"),
    Country("SI", "Slovenia", "🇸🇮"),
    Country("LU", "Luxembourg", "🇱🇺"),
    Country("IS", "Iceland", "🇮🇸"),
    Country("MT", "Malta", "🇲🇹"),
    Country("CY", "Cyprus", "🇨🇾"),
    # asia pacific
    Country("JP", "Japan", "🇯🇵", fred_suffix="JPN"),
    Country("CN", "China", "🇨🇳", fred_suffix="CHN"),
    Country("IN", "India", "🇮🇳", fred_suffix="IND"),
    Country("KR", "South Korea", "🇰🇷", fred_suffix="KOR"),
    Country("AU", "Australia", "🇦🇺", fred_suffix="AUS"),
    Country("NZ", "New Zealand", "🇳🇿", fred_suffix="NZL"),
    Country("SG", "Singapore", "🇸🇬", fred_suffix="SGP"),
    Country("HK", "Hong Kong", "🇭🇰", fred_suffix="HKG"),
    Country("TW", "Taiwan", "🇹🇼"),
    Country("ID", "Indonesia", "🇮🇩", fred_suffix="IDN"),
    Country("MY", "Malaysia", "🇲🇾", fred_suffix="MYS"),
    Country("TH", "Thailand", "🇹🇭", fred_suffix="THA"),
    Country("PH", "Philippines", "🇵🇭"),
    Country("VN", "Vietnam", "🇻🇳"),
    Country("PK", "Pakistan", "🇵🇰"),
    Country("BD", "Bangladesh", "🇧🇩"),
    Country("LK", "Sri Lanka", "🇱🇰"),
    Country("MM", "Myanmar", "🇲🇲"),
    Country("KH", "Cambodia", "🇰🇭"),
    Country("MN", "Mongolia", "🇲🇳"),
    # middle east & central asia
    Country("AE", "UAE", "🇦🇪", fred_suffix="ARE"),
    Country("SA", "Saudi Arabia", "🇸🇦", fred_suffix="SAU"),
    Country("IL", "Israel", "🇮🇱", fred_suffix="ISR"),
    Country("TR", "Turkey", "🇹🇷", fred_suffix="TUR"),
    Country("QA", "Qatar", "🇶🇦"),
    Country("KW", "Kuwait", "🇰🇼"),
    Country("OM", "Oman", "🇴🇲"),
    Country("JO", "Jordan", "🇯🇴"),
    Country("LB", "Lebanon", "🇱🇧"),
    Country("KZ", "Kazakhstan", "🇰🇿"),
    Country("UZ", "Uzbekistan", "🇺🇿"),
    # south & central america
    Country("BR", "Brazil", "🇧🇷", fred_suffix="BRA"),
    Country("AR", "Argentina", "🇦🇷", fred_suffix="ARG"),
    Country("CL", "Chile", "🇨🇱", fred_suffix="CHL"),
    Country("CO", "Colombia", "🇨🇴", fred_suffix="COL"),
    Country("PE", "Peru", "🇵🇪"),
    Country("UY", "Uruguay", "🇺🇾"),
    Country("VE", "Venezuela", "🇻🇪"),
    Country("EC", "Ecuador", "🇪🇨"),
    Country("PY", "Paraguay", "🇵🇾"),
    Country("BO", "Bolivia", "🇧🇴"),
    # africa
    Country("ZA", "South Africa", "🇿🇦", fred_suffix="ZAF"),
    Country("NG", "Nigeria", "🇳🇬", fred_suffix="NGA"),
    Country("EG", "Egypt", "🇪🇬"),
    Country("KE", "Kenya", "🇰🇪"),
    Country("MA", "Morocco", "🇲🇦"),
    Country("GH", "Ghana", "🇬🇭"),
    Country("ET", "Ethiopia", "🇪🇹"),
    Country("TZ", "Tanzania", "🇹🇿"),
    Country("DZ", "Algeria", "🇩🇿"),
    Country("TN", "Tunisia", "🇹🇳"),
    # eurasia
    Country("RU", "Russia", "🇷🇺", fred_suffix="RUS"),
    Country("UA", "Ukraine", "🇺🇦"),
    Country("GE", "Georgia", "🇬🇪"),
    Country("AZ", "Azerbaijan", "🇦🇿"),
    Country("AM", "Armenia", "🇦🇲"),
    Country("RS", "Serbia", "🇷🇸"),
    Country("ME", "Montenegro", "🇲🇪"),
    Country("AL", "Albania", "🇦🇱"),
    Country("MK", "North Macedonia", "🇲🇰"),
    Country("BA", "Bosnia & Herzegovina", "🇧🇦"),
    # more africa
    Country("SN", "Senegal", "🇸🇳"),
    Country("CI", "Cote d'Ivoire", "🇨🇮"),
    Country("CM", "Cameroon", "🇨🇲"),
    Country("UG", "Uganda", "🇺🇬"),
    Country("RW", "Rwanda", "🇷🇼"),
    Country("MU", "Mauritius", "🇲🇺"),
    Country("BW", "Botswana", "🇧🇼"),
    Country("NA", "Namibia", "🇳🇦"),
    Country("AO", "Angola", "🇦🇴"),
    Country("ZM", "Zambia", "🇿🇲"),
    Country("ZW", "Zimbabwe", "🇿🇼"),
    Country("MG", "Madagascar", "🇲🇬"),
    Country("SD", "Sudan", "🇸🇩"),
    Country("LY", "Libya", "🇱🇾"),
    # more middle east & asia
    Country("BH", "Bahrain", "🇧🇭"),
    Country("IR", "Iran", "🇮🇷"),
    Country("IQ", "Iraq", "🇮🇶"),
    Country("YE", "Yemen", "🇾🇪"),
    Country("SY", "Syria", "🇸🇾"),
    Country("AF", "Afghanistan", "🇦🇫"),
    Country("NP", "Nepal", "🇳🇵"),
    Country("BT", "Bhutan", "🇧🇹"),
    Country("MV", "Maldives", "🇲🇻"),
    Country("BN", "Brunei", "🇧🇳"),
    Country("LA", "Laos", "🇱🇦"),
    # more americas & caribbean
    Country("JM", "Jamaica", "🇯🇲"),
    Country("TT", "Trinidad & Tobago", "🇹🇹"),
    Country("BS", "Bahamas", "🇧🇸"),
    Country("BB", "Barbados", "🇧🇧"),
    Country("GT", "Guatemala", "🇬🇹"),
    Country("SV", "El Salvador", "🇸🇻"),
    Country("HN", "Honduras", "🇭🇳"),
    Country("NI", "Nicaragua", "🇳🇮"),
    Country("BZ", "Belize", "🇧🇿"),
    Country("HT", "Haiti", "🇭🇹"),
    Country("GY", "Guyana", "🇬🇾"),
    Country("SR", "Suriname", "🇸🇷"),
    # oceania
    Country("FJ", "Fiji", "🇫🇯"),
    Country("PG", "Papua New Guinea", "🇵🇬"),
    Country("VU", "Vanuatu", "🇻🇺"),
    Country("WS", "Samoa", "🇼🇸"),
    Country("TO", "Tonga", "🇹🇴"),
]

COUNTRY_ENABLED_SIGNALS = (
    "gdp-growth",
    "inflation-cpi",
    "unemployment",
    "consumer-sentiment",
)

# signal id -> country code -> FRED series id
FRED_SERIES_MAP: Dict[str, Dict[str, str]] = {
    "gdp-growth": {
        "US": "GDP",
        "CA": "NGDPRSAXDCCAQ",
        "GB": "CLVMNACSCAB1GQUK",
        "DE": "CLVMNACSCAB1GQDE",
        "FR": "CLVMNACSCAB1GQFR",
        "JP": "JPNRGDPEXP",
        "CN": "MKTGDPCNA646NWDB",
        "IN": "MKTGDPINA646NWDB",
        "AU": "AUSGDPNQDSMEI",
        "BR": "BRAGDPRQPSMEI",
        "MX": "MEXGDPNQDSMEI",
        "KR": "KORGDPNQDSMEI",
        "IT": "ITANRGDPQDSNAQ",
        "ES": "ESPNRGDPQDSNAQ",
        "NL": "NLDNRGDPQDSNAQ",
        "CH": "CHLNRGDPQDSNAQ",
        "SE": "SWENRGDPQDSNAQ",
        "PL": "POLNRGDPQDSNAQ",
        "TR": "TURNRGDPQDSNAQ",
        "ZA": "ZAFNRGDPQDSNAQ",
        "SA": "SAUNRGDPQDSNAQ",
        "IL": "ISRNRGDPQDSNAQ",
    },
    "inflation-cpi": {
        "US": "CPIAUCSL",
        "CA": "CPALCY01CAM661N",
        "GB": "CPALCY01GBM659N",
        "DE": "CPALCY01DEM659N",
        "FR": "CPALCY01FRM659N",
        "JP": "CPALCY01JPM659N",
        "CN": "CHNCPIALLMINMEI",
        "IN": "INDCPIALLMINMEI",
        "AU": "AUSCPIALLQINMEI",
        "BR": "BRACPIALLMINMEI",
        "MX": "MEXCPIALLMINMEI",
        "KR": "KORCPIALLMINMEI",
        "IT": "ITACPIALLMINMEI",
        "ES": "ESPCPIALLMINMEI",
        "NL": "NLDCPIALLMINMEI",
        "CH": "CHECPIALLMINMEI",
        "SE": "SWECPIALLMINMEI",
        "PL": "POLCPIALLMINMEI",
        "TR": "TURCPIALLMINMEI",
        "ZA": "ZAFCPIALLMINMEI",
        "RU": "RUSCPIALLMINMEI",
        "SA": "SAUCPIALLMINMEI",
        "AE": "ARECPIALLMINMEI",
        "SG": "SGPCPIALLMINMEI",
        "HK": "HKGCPIALLMINMEI",
    },
    "unemployment": {
        "US": "UNRATE",
        "CA": "LRUNTTTTCAM156S",
        "GB": "LRUNTTTTGBM156S",
        "DE": "LRUNTTTTDEM156S",
        "FR": "LRUNTTTTFRM156S",
        "JP": "LRUNTTTTJPM156S",
        "AU": "LRUNTTTTAUM156S",
        "BR": "LRUNTTTTBRM156S",
        "MX": "LRUNTTTTMXM156S",
        "KR": "LRUNTTTTKRM156S",
        "IT": "LRUNTTTTITM156S",
        "ES": "LRUNTTTTESM156S",
        "NL": "LRUNTTTTNLM156S",
        "CH": "LRUNTTTTCHM156S",
        "SE": "LRUNTTTTSEM156S",
        "PL": "LRUNTTTTPLM156S",
        "TR": "LRUNTTTTTRM156S",
        "ZA": "LRUNTTTTZAM156S",
        "RU": "LRUNTTTTRUM156S",
        "IN": "LRUNTTTTINQ156S",
        "CN": "LRUNTTTTCNQ156S",
    },
    "consumer-sentiment": {
        "US": "UMCSENT",
        "GB": "GBRCCIS",
        "DE": "DEUCCIS",
        "FR": "FRACCIS",
        "JP": "JPNCCIS",
        "AU": "AUSCCIS",
    },
}

_BY_CODE: Dict[str, Country] = {c.code: c for c in COUNTRIES}


def countries_for_signal(signal_id: str) -> List[Country]:
    # every country is offered for an enabled signal, even without a FRED id
    if signal_id not in COUNTRY_ENABLED_SIGNALS:
        return []
    return list(COUNTRIES)


def fred_series_for_country(signal_id: str, country_code: str) -> Optional[str]:
    return FRED_SERIES_MAP.get(signal_id, {}).get(country_code.upper()) or None


def country_by_code(code: str) -> Optional[Country]:
    return _BY_CODE.get(code.upper())


def default_country() -> Country:
    return next((c for c in COUNTRIES if c.is_default), COUNTRIES[0])
