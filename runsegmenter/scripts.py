"""Unicode script values."""

from enum import Enum


# ISO 15924 codes keyed by the Unicode long script name (Scripts.txt / PropertyValueAliases.txt)
SCRIPT_CODES = {
    "Adlam": "Adlm",
    "Ahom": "Ahom",
    "Anatolian_Hieroglyphs": "Hluw",
    "Arabic": "Arab",
    "Armenian": "Armn",
    "Avestan": "Avst",
    "Balinese": "Bali",
    "Bamum": "Bamu",
    "Bassa_Vah": "Bass",
    "Batak": "Batk",
    "Bengali": "Beng",
    "Bhaiksuki": "Bhks",
    "Bopomofo": "Bopo",
    "Brahmi": "Brah",
    "Braille": "Brai",
    "Buginese": "Bugi",
    "Buhid": "Buhd",
    "Canadian_Aboriginal": "Cans",
    "Carian": "Cari",
    "Caucasian_Albanian": "Aghb",
    "Chakma": "Cakm",
    "Cham": "Cham",
    "Cherokee": "Cher",
    "Chorasmian": "Chrs",
    "Common": "Zyyy",
    "Coptic": "Copt",
    "Cuneiform": "Xsux",
    "Cypriot": "Cprt",
    "Cypro_Minoan": "Cpmn",
    "Cyrillic": "Cyrl",
    "Deseret": "Dsrt",
    "Devanagari": "Deva",
    "Dives_Akuru": "Diak",
    "Dogra": "Dogr",
    "Duployan": "Dupl",
    "Egyptian_Hieroglyphs": "Egyp",
    "Elbasan": "Elba",
    "Elymaic": "Elym",
    "Ethiopic": "Ethi",
    "Georgian": "Geor",
    "Glagolitic": "Glag",
    "Gothic": "Goth",
    "Grantha": "Gran",
    "Greek": "Grek",
    "Gujarati": "Gujr",
    "Gunjala_Gondi": "Gong",
    "Gurmukhi": "Guru",
    "Han": "Hani",
    "Hangul": "Hang",
    "Hanifi_Rohingya": "Rohg",
    "Hanunoo": "Hano",
    "Hatran": "Hatr",
    "Hebrew": "Hebr",
    "Hiragana": "Hira",
    "Imperial_Aramaic": "Armi",
    "Inherited": "Zinh",
    "Inscriptional_Pahlavi": "Phli",
    "Inscriptional_Parthian": "Prti",
    "Javanese": "Java",
    "Kaithi": "Kthi",
    "Kannada": "Knda",
    "Katakana": "Kana",
    "Kawi": "Kawi",
    "Kayah_Li": "Kali",
    "Kharoshthi": "Khar",
    "Khitan_Small_Script": "Kits",
    "Khmer": "Khmr",
    "Khojki": "Khoj",
    "Khudawadi": "Sind",
    "Lao": "Laoo",
    "Latin": "Latn",
    "Lepcha": "Lepc",
    "Limbu": "Limb",
    "Linear_A": "Lina",
    "Linear_B": "Linb",
    "Lisu": "Lisu",
    "Lycian": "Lyci",
    "Lydian": "Lydi",
    "Mahajani": "Mahj",
    "Makasar": "Maka",
    "Malayalam": "Mlym",
    "Mandaic": "Mand",
    "Manichaean": "Mani",
    "Marchen": "Marc",
    "Masaram_Gondi": "Gonm",
    "Medefaidrin": "Medf",
    "Meetei_Mayek": "Mtei",
    "Mende_Kikakui": "Mend",
    "Meroitic_Cursive": "Merc",
    "Meroitic_Hieroglyphs": "Mero",
    "Miao": "Plrd",
    "Modi": "Modi",
    "Mongolian": "Mong",
    "Mro": "Mroo",
    "Multani": "Mult",
    "Myanmar": "Mymr",
    "Nabataean": "Nbat",
    "Nag_Mundari": "Nagm",
    "Nandinagari": "Nand",
    "New_Tai_Lue": "Talu",
    "Newa": "Newa",
    "Nko": "Nkoo",
    "Nushu": "Nshu",
    "Nyiakeng_Puachue_Hmong": "Hmnp",
    "Ogham": "Ogam",
    "Ol_Chiki": "Olck",
    "Old_Hungarian": "Hung",
    "Old_Italic": "Ital",
    "Old_North_Arabian": "Narb",
    "Old_Permic": "Perm",
    "Old_Persian": "Xpeo",
    "Old_Sogdian": "Sogo",
    "Old_South_Arabian": "Sarb",
    "Old_Turkic": "Orkh",
    "Old_Uyghur": "Ougr",
    "Oriya": "Orya",
    "Osage": "Osge",
    "Osmanya": "Osma",
    "Pahawh_Hmong": "Hmng",
    "Palmyrene": "Palm",
    "Pau_Cin_Hau": "Pauc",
    "Phags_Pa": "Phag",
    "Phoenician": "Phnx",
    "Psalter_Pahlavi": "Phlp",
    "Rejang": "Rjng",
    "Runic": "Runr",
    "Samaritan": "Samr",
    "Saurashtra": "Saur",
    "Sharada": "Shrd",
    "Shavian": "Shaw",
    "Siddham": "Sidd",
    "SignWriting": "Sgnw",
    "Sinhala": "Sinh",
    "Sogdian": "Sogd",
    "Sora_Sompeng": "Sora",
    "Soyombo": "Soyo",
    "Sundanese": "Sund",
    "Syloti_Nagri": "Sylo",
    "Syriac": "Syrc",
    "Tagalog": "Tglg",
    "Tagbanwa": "Tagb",
    "Tai_Le": "Tale",
    "Tai_Tham": "Lana",
    "Tai_Viet": "Tavt",
    "Takri": "Takr",
    "Tamil": "Taml",
    "Tangsa": "Tnsa",
    "Tangut": "Tang",
    "Telugu": "Telu",
    "Thaana": "Thaa",
    "Thai": "Thai",
    "Tibetan": "Tibt",
    "Tifinagh": "Tfng",
    "Tirhuta": "Tirh",
    "Toto": "Toto",
    "Ugaritic": "Ugar",
    "Unknown": "Zzzz",
    "Vai": "Vaii",
    "Vithkuqi": "Vith",
    "Wancho": "Wcho",
    "Warang_Citi": "Wara",
    "Yezidi": "Yezi",
    "Yi": "Yiii",
    "Zanabazar_Square": "Zanb",
}


def _normalize(name: str) -> str:
    return name.strip().replace(" ", "_").replace("-", "_").lower()


class Script(Enum):
    """Unicode ``Script`` property value, valued by its long name."""

    ADLAM = "Adlam"
    AHOM = "Ahom"
    ANATOLIAN_HIEROGLYPHS = "Anatolian_Hieroglyphs"
    ARABIC = "Arabic"
    ARMENIAN = "Armenian"
    AVESTAN = "Avestan"
    BALINESE = "Balinese"
    BAMUM = "Bamum"
    BASSA_VAH = "Bassa_Vah"
    BATAK = "Batak"
    BENGALI = "Bengali"
    BHAIKSUKI = "Bhaiksuki"
    BOPOMOFO = "Bopomofo"
    BRAHMI = "Brahmi"
    BRAILLE = "Braille"
    BUGINESE = "Buginese"
    BUHID = "Buhid"
    CANADIAN_ABORIGINAL = "Canadian_Aboriginal"
    CARIAN = "Carian"
    CAUCASIAN_ALBANIAN = "Caucasian_Albanian"
    CHAKMA = "Chakma"
    CHAM = "Cham"
    CHEROKEE = "Cherokee"
    CHORASMIAN = "Chorasmian"
    COMMON = "Common"
    COPTIC = "Coptic"
    CUNEIFORM = "Cuneiform"
    CYPRIOT = "Cypriot"
    CYPRO_MINOAN = "Cypro_Minoan"
    CYRILLIC = "Cyrillic"
    DESERET = "Deseret"
    DEVANAGARI = "Devanagari"
    DIVES_AKURU = "Dives_Akuru"
    DOGRA = "Dogra"
    DUPLOYAN = "Duployan"
    EGYPTIAN_HIEROGLYPHS = "Egyptian_Hieroglyphs"
    ELBASAN = "Elbasan"
    ELYMAIC = "Elymaic"
    ETHIOPIC = "Ethiopic"
    GEORGIAN = "Georgian"
    GLAGOLITIC = "Glagolitic"
    GOTHIC = "Gothic"
    GRANTHA = "Grantha"
    GREEK = "Greek"
    GUJARATI = "Gujarati"
    GUNJALA_GONDI = "Gunjala_Gondi"
    GURMUKHI = "Gurmukhi"
    HAN = "Han"
    HANGUL = "Hangul"
    HANIFI_ROHINGYA = "Hanifi_Rohingya"
    HANUNOO = "Hanunoo"
    HATRAN = "Hatran"
    HEBREW = "Hebrew"
    HIRAGANA = "Hiragana"
    IMPERIAL_ARAMAIC = "Imperial_Aramaic"
    INHERITED = "Inherited"
    INSCRIPTIONAL_PAHLAVI = "Inscriptional_Pahlavi"
    INSCRIPTIONAL_PARTHIAN = "Inscriptional_Parthian"
    JAVANESE = "Javanese"
    KAITHI = "Kaithi"
    KANNADA = "Kannada"
    KATAKANA = "Katakana"
    KAWI = "Kawi"
    KAYAH_LI = "Kayah_Li"
    KHAROSHTHI = "Kharoshthi"
    KHITAN_SMALL_SCRIPT = "Khitan_Small_Script"
    KHMER = "Khmer"
    KHOJKI = "Khojki"
    KHUDAWADI = "Khudawadi"
    LAO = "Lao"
    LATIN = "Latin"
    LEPCHA = "Lepcha"
    LIMBU = "Limbu"
    LINEAR_A = "Linear_A"
    LINEAR_B = "Linear_B"
    LISU = "Lisu"
    LYCIAN = "Lycian"
    LYDIAN = "Lydian"
    MAHAJANI = "Mahajani"
    MAKASAR = "Makasar"
    MALAYALAM = "Malayalam"
    MANDAIC = "Mandaic"
    MANICHAEAN = "Manichaean"
    MARCHEN = "Marchen"
    MASARAM_GONDI = "Masaram_Gondi"
    MEDEFAIDRIN = "Medefaidrin"
    MEETEI_MAYEK = "Meetei_Mayek"
    MENDE_KIKAKUI = "Mende_Kikakui"
    MEROITIC_CURSIVE = "Meroitic_Cursive"
    MEROITIC_HIEROGLYPHS = "Meroitic_Hieroglyphs"
    MIAO = "Miao"
    MODI = "Modi"
    MONGOLIAN = "Mongolian"
    MRO = "Mro"
    MULTANI = "Multani"
    MYANMAR = "Myanmar"
    NABATAEAN = "Nabataean"
    NAG_MUNDARI = "Nag_Mundari"
    NANDINAGARI = "Nandinagari"
    NEW_TAI_LUE = "New_Tai_Lue"
    NEWA = "Newa"
    NKO = "Nko"
    NUSHU = "Nushu"
    NYIAKENG_PUACHUE_HMONG = "Nyiakeng_Puachue_Hmong"
    OGHAM = "Ogham"
    OL_CHIKI = "Ol_Chiki"
    OLD_HUNGARIAN = "Old_Hungarian"
    OLD_ITALIC = "Old_Italic"
    OLD_NORTH_ARABIAN = "Old_North_Arabian"
    OLD_PERMIC = "Old_Permic"
    OLD_PERSIAN = "Old_Persian"
    OLD_SOGDIAN = "Old_Sogdian"
    OLD_SOUTH_ARABIAN = "Old_South_Arabian"
    OLD_TURKIC = "Old_Turkic"
    OLD_UYGHUR = "Old_Uyghur"
    ORIYA = "Oriya"
    OSAGE = "Osage"
    OSMANYA = "Osmanya"
    PAHAWH_HMONG = "Pahawh_Hmong"
    PALMYRENE = "Palmyrene"
    PAU_CIN_HAU = "Pau_Cin_Hau"
    PHAGS_PA = "Phags_Pa"
    PHOENICIAN = "Phoenician"
    PSALTER_PAHLAVI = "Psalter_Pahlavi"
    REJANG = "Rejang"
    RUNIC = "Runic"
    SAMARITAN = "Samaritan"
    SAURASHTRA = "Saurashtra"
    SHARADA = "Sharada"
    SHAVIAN = "Shavian"
    SIDDHAM = "Siddham"
    SIGNWRITING = "SignWriting"
    SINHALA = "Sinhala"
    SOGDIAN = "Sogdian"
    SORA_SOMPENG = "Sora_Sompeng"
    SOYOMBO = "Soyombo"
    SUNDANESE = "Sundanese"
    SYLOTI_NAGRI = "Syloti_Nagri"
    SYRIAC = "Syriac"
    TAGALOG = "Tagalog"
    TAGBANWA = "Tagbanwa"
    TAI_LE = "Tai_Le"
    TAI_THAM = "Tai_Tham"
    TAI_VIET = "Tai_Viet"
    TAKRI = "Takri"
    TAMIL = "Tamil"
    TANGSA = "Tangsa"
    TANGUT = "Tangut"
    TELUGU = "Telugu"
    THAANA = "Thaana"
    THAI = "Thai"
    TIBETAN = "Tibetan"
    TIFINAGH = "Tifinagh"
    TIRHUTA = "Tirhuta"
    TOTO = "Toto"
    UGARITIC = "Ugaritic"
    UNKNOWN = "Unknown"
    VAI = "Vai"
    VITHKUQI = "Vithkuqi"
    WANCHO = "Wancho"
    WARANG_CITI = "Warang_Citi"
    YEZIDI = "Yezidi"
    YI = "Yi"
    ZANABAZAR_SQUARE = "Zanabazar_Square"

    @property
    def code(self) -> str:
        """ISO 15924 four-letter code."""
        return SCRIPT_CODES[self.value]

    @property
    def is_neutral(self) -> bool:
        """Common and Inherited carry no identity of their own."""
        return self in (Script.COMMON, Script.INHERITED)

    @classmethod
    def from_name(cls, name: str) -> "Script":
        """Look up a script by long name or ISO 15924 code.

        Lookup ignores case and accepts spaces or hyphens in place of
        underscores. Anything unrecognized is ``Script.UNKNOWN``.

        Args:
            name: Script long name ("Old_Italic", "old italic") or code ("Ital")

        Returns:
            Matching Script member
        """
        if not name:
            return cls.UNKNOWN
        return _BY_NAME.get(_normalize(name), cls.UNKNOWN)

    def __str__(self) -> str:
        return self.value


_BY_NAME = {}
for _script in Script:
    _BY_NAME[_normalize(_script.value)] = _script
    _BY_NAME[_normalize(SCRIPT_CODES[_script.value])] = _script
# Qaai is the pre-2009 ISO 15924 code for Inherited
_BY_NAME["qaai"] = Script.INHERITED
del _script
