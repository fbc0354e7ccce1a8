"""
Country reference data for the country select helper.

Holds the bundled table of ISO-3166-1 alpha-2 codes with their English and
native names, plus the continent groupings used for the synthetic
"world region" options. Everything here is built once at import time and
exposed read-only.

The table is deliberately a fixed snapshot: it still carries a few retired
codes (e.g. "AN", "CS") and misses some newer ones. Use
find_non_iso_codes() and audit_region_membership() to inspect the gaps.
"""

import logging
from collections import namedtuple
from types import MappingProxyType

import pycountry

logger = logging.getLogger(__name__)


class UnknownCodeError(LookupError):
    """Raised when a code is neither a known country nor a region code."""


CountryEntry = namedtuple("CountryEntry", ["english_name", "native_name"])

# code -> (english name, native name or None)
_COUNTRY_DATA = {
    "AD": ("Andorra", None),
    "AE": ("United Arab Emirates", "الإمارات العربيّة المتّحدة"),
    "AF": ("Afghanistan", "افغانستان"),
    "AG": ("Antigua and Barbuda", None),
    "AI": ("Anguilla", None),
    "AL": ("Albania", "Shqipëria"),
    "AM": ("Armenia", "Հայաստան"),
    "AN": ("Netherlands Antilles", "Nederlandse Antillen"),
    "AO": ("Angola", None),
    "AQ": ("Antarctica", None),
    "AR": ("Argentina", None),
    "AS": ("American Samoa", None),
    "AT": ("Austria", "Österreich"),
    "AU": ("Australia", None),
    "AW": ("Aruba", None),
    "AX": ("Aland Islands", None),
    "AZ": ("Azerbaijan", "Azərbaycan"),
    "BA": ("Bosnia and Herzegovina", "Bosna i Hercegovina"),
    "BB": ("Barbados", None),
    "BD": ("Bangladesh", "বাংলাদেশ"),
    "BE": ("Belgium", "België"),
    "BF": ("Burkina Faso", None),
    "BG": ("Bulgaria", "България"),
    "BH": ("Bahrain", "البحرين"),
    "BI": ("Burundi", None),
    "BJ": ("Benin", "Bénin"),
    "BM": ("Bermuda", "Bermuda"),
    "BN": ("Brunei Darussalam", None),
    "BO": ("Bolivia", None),
    "BR": ("Brazil", "Brasil"),
    "BS": ("Bahamas", None),
    "BT": ("Bhutan", None),
    "BV": ("Bouvet Island", None),
    "BW": ("Botswana", None),
    "BY": ("Belarus", "Беларусь"),
    "BZ": ("Belize", None),
    "CA": ("Canada", None),
    "CC": ("Cocos (Keeling) Islands", None),
    "CD": ("Congo, the Democratic Republic of the", None),
    "CF": ("Central African Republic", "Ködörösêse tî Bêafrîka"),
    "CG": ("Congo", None),
    "CH": ("Switzerland", "Schweiz"),
    "CI": ("Cote D'ivoire", None),
    "CK": ("Cook Islands", "Kūki 'Āirani"),
    "CL": ("Chile", "Chile"),
    "CM": ("Cameroon", None),
    "CN": ("China", "چین"),
    "CO": ("Colombia", None),
    "CR": ("Costa Rica", None),
    "CS": ("Serbia and Montenegro", None),
    "CU": ("Cuba", None),
    "CV": ("Cape Verde", "Cabo Verde"),
    "CX": ("Christmas Island", None),
    "CY": ("Cyprus", "Kıbrıs"),
    "CZ": ("Czech Republic", "Česká republika or Česko"),
    "DE": ("Germany", "Deutschland"),
    "DJ": ("Djibouti", None),
    "DK": ("Denmark", None),
    "DM": ("Dominica", None),
    "DO": ("Dominican Republic", "República Dominicana"),
    "DZ": ("Algeria", "الجزائر"),
    "EC": ("Ecuador", None),
    "EE": ("Estonia", "Eesti"),
    "EG": ("Egypt", "مصر"),
    "EH": ("Western Sahara", None),
    "ER": ("Eritrea", "Ertra"),
    "ES": ("Spain", "Espainia"),
    "ET": ("Ethiopia", "Etiopia"),
    "FI": ("Finland", None),
    "FJ": ("Fiji", "Viti"),
    "FK": ("Falkland Islands (Malvinas)", None),
    "FM": ("Micronesia, Federated States of", None),
    "FO": ("Faroe Islands", "Færøerne"),
    "FR": ("France", None),
    "GA": ("Gabon", None),
    "GB": ("United Kingdom", None),
    "GD": ("Grenada", None),
    "GE": ("Georgia", "საქართველო"),
    "GF": ("French Guiana", None),
    "GG": ("Guernsey", None),
    "GH": ("Ghana", None),
    "GI": ("Gibraltar", None),
    "GL": ("Greenland", "Grønland"),
    "GM": ("Gambia", None),
    "GN": ("Guinea", "Guinée"),
    "GP": ("Guadeloupe", None),
    "GQ": ("Equatorial Guinea", None),
    "GR": ("Greece", "Ελλάδα"),
    "GS": ("South Georgia and the South Sandwich Islands", None),
    "GT": ("Guatemala", None),
    "GU": ("Guam", "Guåhan"),
    "GW": ("Guinea-Bissau", "Guiné-Bissau"),
    "GY": ("Guyana", None),
    "HK": ("Hong Kong", "香港"),
    "HM": ("Heard Island and Mcdonald Islands", None),
    "HN": ("Honduras", None),
    "HR": ("Croatia", "Hrvatska"),
    "HT": ("Haiti", "Ayiti"),
    "HU": ("Hungary", "Magyarország"),
    "ID": ("Indonesia", None),
    "IE": ("Ireland", "Éireann"),
    "IL": ("Israel", "ישראל"),
    "IM": ("Isle of Man", "Ellan Vannin"),
    "IN": ("India", "भारत"),
    "IO": ("British Indian Ocean Territory", None),
    "IQ": ("Iraq", "العراق"),
    "IR": ("Iran, Islamic Republic of", None),
    "IS": ("Iceland", "Ísland"),
    "IT": ("Italy", None),
    "JE": ("Jersey", "Jèrri"),
    "JM": ("Jamaica", None),
    "JO": ("Jordan", "الاردن"),
    "JP": ("Japan", "日本"),
    "KE": ("Kenya", None),
    "KG": ("Kyrgyzstan", "Киргизия"),
    "KH": ("Cambodia", None),
    "KI": ("Kiribati", None),
    "KM": ("Comoros", "Comores"),
    "KN": ("Saint Kitts and Nevis", None),
    "KP": ("Korea, Democratic People's Republic of", None),
    "KR": ("Korea, Republic of", None),
    "KW": ("Kuwait", "الكويت"),
    "KY": ("Cayman Islands", None),
    "KZ": ("Kazakhstan", "Қазақстан"),
    "LA": ("Lao People's Democratic Republic", None),
    "LB": ("Lebanon", "لبنان"),
    "LC": ("Saint Lucia", None),
    "LI": ("Liechtenstein", None),
    "LK": ("Sri Lanka", "இலங்கை"),
    "LR": ("Liberia", None),
    "LS": ("Lesotho", None),
    "LT": ("Lithuania", "Lietuva"),
    "LU": ("Luxembourg", "Lëtzebuerg"),
    "LV": ("Latvia", "Latvija"),
    "LY": ("Libyan Arab Jamahiriya", None),
    "MA": ("Morocco", "المغرب"),
    "MC": ("Monaco", None),
    "MD": ("Moldova, Republic of", None),
    "MG": ("Madagascar", None),
    "MH": ("Marshall Islands", None),
    "MK": ("Macedonia, the Former Yugoslav Republic of", None),
    "ML": ("Mali", None),
    "MM": ("Myanmar", None),
    "MN": ("Mongolia", "Монгол Улс"),
    "MO": ("Macao", None),
    "MP": ("Northern Mariana Islands", None),
    "MQ": ("Martinique", None),
    "MR": ("Mauritania", "Mauritanie"),
    "MS": ("Montserrat", None),
    "MT": ("Malta", None),
    "MU": ("Mauritius", "Maurice"),
    "MV": ("Maldives", "ގުޖޭއްރާ ޔާއްރިހޫމްޖު"),
    "MW": ("Malawi", None),
    "MX": ("Mexico", "México"),
    "MY": ("Malaysia", None),
    "MZ": ("Mozambique", "Moçambique"),
    "NA": ("Namibia", None),
    "NC": ("New Caledonia", "Nouvelle-Calédonie"),
    "NE": ("Niger", None),
    "NF": ("Norfolk Island", None),
    "NG": ("Nigeria", None),
    "NI": ("Nicaragua", None),
    "NL": ("Netherlands", None),
    "NO": ("Norway", "Norge"),
    "NP": ("Nepal", "नेपाल"),
    "NR": ("Nauru", "Naoero"),
    "NU": ("Niue", None),
    "NZ": ("New Zealand", "Aotearoa"),
    "OM": ("Oman", "عمان"),
    "PA": ("Panama", "Panamá"),
    "PE": ("Peru", "Perú"),
    "PF": ("French Polynesia", "Polynésie Française"),
    "PG": ("Papua New Guinea", "Papua Niugini"),
    "PH": ("Philippines", "El Filipinas"),
    "PK": ("Pakistan", "پاکستان"),
    "PL": ("Poland", "Polska"),
    "PM": ("Saint Pierre and Miquelon", "Saint-Pierre-et-Miquelon"),
    "PN": ("Pitcairn", None),
    "PR": ("Puerto Rico", None),
    "PS": ("Palestinian Territory, Occupied", None),
    "PT": ("Portugal", None),
    "PW": ("Palau", "Belau"),
    "PY": ("Paraguay", "Paraguái"),
    "QA": ("Qatar", "قطر"),
    "RE": ("Reunion", None),
    "RO": ("Romania", "România"),
    "RU": ("Russian Federation", None),
    "RW": ("Rwanda", None),
    "SA": ("Saudi Arabia", "المملكة العربية السعودية"),
    "SB": ("Solomon Islands", None),
    "SC": ("Seychelles", "Sesel"),
    "SD": ("Sudan", "السودان"),
    "SE": ("Sweden", "Sverige"),
    "SG": ("Singapore", "சிங்கப்பூர்"),
    "SH": ("Saint Helena", None),
    "SI": ("Slovenia", "Slovenija"),
    "SJ": ("Svalbard and Jan Mayen", None),
    "SK": ("Slovakia", "Slovensko"),
    "SL": ("Sierra Leone", "Serra Leoa"),
    "SM": ("San Marino", None),
    "SN": ("Senegal", "Sénégal"),
    "SO": ("Somalia", "As-Sūmāl"),
    "SR": ("Suriname", None),
    "ST": ("Sao Tome and Principe", None),
    "SV": ("El Salvador", None),
    "SY": ("Syrian Arab Republic", None),
    "SZ": ("Swaziland", "Swatini"),
    "TC": ("Turks and Caicos Islands", None),
    "TD": ("Chad", "تشاد"),
    "TF": ("French Southern Territories", None),
    "TG": ("Togo", None),
    "TH": ("Thailand", "ประเทศไทย"),
    "TJ": ("Tajikistan", "Тоҷикистон"),
    "TK": ("Tokelau", None),
    "TL": ("Timor-Leste", None),
    "TM": ("Turkmenistan", "Türkmenistan"),
    "TN": ("Tunisia", "تونس"),
    "TO": ("Tonga", None),
    "TR": ("Turkey", "Türkiye"),
    "TT": ("Trinidad and Tobago", None),
    "TV": ("Tuvalu", None),
    "TW": ("Taiwan, Province of China", None),
    "TZ": ("Tanzania, United Republic of", None),
    "UA": ("Ukraine", "Україна"),
    "UG": ("Uganda", None),
    "UM": ("United States Minor Outlying Islands", None),
    "US": ("United States", None),
    "UY": ("Uruguay", None),
    "UZ": ("Uzbekistan", "Ўзбекистон"),
    "VA": ("Holy See (Vatican City State)", None),
    "VC": ("Saint Vincent and the Grenadines", None),
    "VE": ("Venezuela", None),
    "VG": ("Virgin Islands, British", None),
    "VI": ("Virgin Islands, U.S.", None),
    "VN": ("Viet Nam", None),
    "VU": ("Vanuatu", None),
    "WF": ("Wallis and Futuna", None),
    "WS": ("Samoa", None),
    "YE": ("Yemen", "اليمن"),
    "YT": ("Mayotte", None),
    "ZA": ("South Africa", "Mzantsi Afrika"),
    "ZM": ("Zambia", None),
    "ZW": ("Zimbabwe", None),
}

COUNTRIES = MappingProxyType({
    code: CountryEntry(english, native)
    for code, (english, native) in _COUNTRY_DATA.items()
})

CODES = frozenset(COUNTRIES)

EUROPE = frozenset("""
    AX AL AD AT BY BE BA BG HR CZ DK EE FO FI FR DE GI GR GG VA HU
    IS IE IM IT JE LV LI LT LU MK MT MD MC ME NL NO PL PT RO RU SM
    RS SK SI ES SJ SE CH UA GB
""".split())

NORTH_AMERICA = frozenset("""
    AI AG AW BS BB BZ BM VG CA KY CR CU DM DO SV GL GD GP GT HT HN
    JM MQ MX MS AN NI PA PR BL KN LC MF PM VC TT TC US VI
""".split())

SOUTH_AMERICA = frozenset("""
    AR BO BR CL CO EC FK GF GY PY PE SR UY VE
""".split())

ASIA = frozenset("""
    AF AM AZ BH BD BT IO BN KH CN CX CC CY GE HK IN ID IR IQ IL JP
    JO KZ KP KR KW KG LA LB MO MY MV MN MM NP OM PK PS PH QA SA SG
    LK SY TW TJ TH TL TR TM AE UZ VN YE
""".split())

AFRICA = frozenset("""
    DZ AO BJ BW BF BI CM CV CF TD KM CD CG CI DJ EG GQ ER ET GA GM
    GH GN GW KE LS LR LY MG MW ML MR MU YT MA MZ NA NE NG RE RW SH
    ST SN SC SL SO ZA SD SZ TZ TG TN UG EH ZM ZW
""".split())

OCEANIA = frozenset("""
    AS AU CK FJ PF GU KI MH FM NR NC NZ NU NF MP PW PG PN WS SB TK
    TO TV UM VU WF
""".split())

# Rendering order of the world region options
REGION_CODES = ("EUC", "NAC", "SAC", "ASC", "AFC", "OCC")

REST_OF_WORLD = "ROW"

REGIONS = MappingProxyType({
    "EUC": EUROPE,
    "NAC": NORTH_AMERICA,
    "SAC": SOUTH_AMERICA,
    "ASC": ASIA,
    "AFC": AFRICA,
    "OCC": OCEANIA,
})


def is_region_code(code):
    """Region and rest-of-world codes are the only codes longer than two characters."""
    return len(code) > 2


def lookup_country(code):
    """
    Return the CountryEntry for a code, or None when the code is not in the table.

    Args:
        code (str): ISO-3166-1 alpha-2 code, uppercase.

    Returns:
        CountryEntry or None
    """
    return COUNTRIES.get(code)
# End of function lookup_country()


def country_codes():
    """Return the frozenset of every country code in the bundled table."""
    return CODES


def region_members(region_code):
    """
    Return the set of country codes grouped under a world region.

    Args:
        region_code (str): One of REGION_CODES, e.g. "EUC".

    Returns:
        frozenset[str]: Member country codes.

    Raises:
        UnknownCodeError: if region_code is not a continent region.
    """
    try:
        return REGIONS[region_code]
    except KeyError:
        raise UnknownCodeError(f"Unknown region code: {region_code!r}") from None
# End of function region_members()


def region_for_country(code):
    """Return the region code a country is grouped under, or None."""
    for region_code in REGION_CODES:
        if code in REGIONS[region_code]:
            return region_code
    return None
# End of function region_for_country()


def audit_region_membership():
    """
    Report region members that have no entry in the country table.

    Region lists are not checked against the table when the module loads;
    such codes simply never show up in the rendered list. This function
    makes the gaps visible.

    Returns:
        dict[str, list[str]]: region code -> sorted missing country codes.
            Regions without gaps are left out.
    """
    missing = {}
    for region_code in REGION_CODES:
        gaps = sorted(REGIONS[region_code] - CODES)
        if gaps:
            missing[region_code] = gaps
            logger.warning(
                "Region %s lists codes missing from the country table: %s",
                region_code, ", ".join(gaps),
            )
    # End of the loop that checks each region
    return missing
# End of function audit_region_membership()


def find_non_iso_codes():
    """
    List table codes that are not current ISO-3166-1 alpha-2 codes.

    Uses pycountry's copy of the ISO database, so the answer follows the
    installed pycountry release.

    Returns:
        list[str]: Sorted codes unknown to pycountry.countries.
    """
    stale = [
        code for code in sorted(CODES)
        if pycountry.countries.get(alpha_2=code) is None
    ]
    if stale:
        logger.info("Country table carries retired ISO codes: %s", ", ".join(stale))
    return stale
# End of function find_non_iso_codes()
