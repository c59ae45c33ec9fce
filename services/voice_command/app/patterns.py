"""Trigger phrase catalog for voice command intents.

Each intent maps locale groups to trigger words or short phrases. Both the
native script and common romanized spellings are listed, since browser
speech recognition returns either depending on the engine.

Iteration order matters: intents are scanned in declaration order and the
first match in a tier wins.
"""

from typing import Dict, List, Tuple

from .models import Intent

INTENT_PATTERNS: Dict[Intent, Dict[str, List[str]]] = {
    Intent.READ_SUMMARY: {
        "en": [
            "summary", "summarize", "summarise", "summery", "some marie", "some mary", "samari",
            "read", "explain", "tell",
        ],
        "te": [
            "సారాంశం", "సారాంశ", "చదవండి", "చదువు", "చెప్పండి", "చెప్పు",
            "saaramsam", "saaram", "chadavandi", "chepandi", "cheppu",
        ],
        "ta": [
            "சுருக்கம்", "சாரம்", "படிக்க", "சொல்", "விளக்கு",
            "surukkam", "saaram", "padikka", "sol", "vilakku",
        ],
        "kn": [
            "ಸಾರಾಂಶ", "ಓದು", "ಹೇಳು", "ವಿವರಿಸು",
            "saaramsha", "odu", "helu", "vivarisu",
        ],
        "ml": [
            "സംഗ്രഹം", "വായിക്കുക", "പറയുക", "വിശദീകരിക്കുക",
            "samgraham", "vaayikkuka", "parayuka", "vishadeekarikkuka",
        ],
        "bn": [
            "সারসংক্ষেপ", "সারাংশ", "পড়ো", "বলো", "ব্যাখ্যা",
            "sarsankhep", "saransh", "poro", "bolo", "byakhya",
        ],
        "hi": [
            "सारांश", "पढ़ो", "बताओ", "समझाओ",
        ],
    },
    Intent.GET_DEADLINES: {
        "en": [
            "deadline", "deadlines", "date", "dates", "when", "due", "expiry", "expires", "validity",
        ],
        "te": [
            "గడువు", "గడువులు", "తేదీ", "తేదీలు", "ఎప్పుడు", "కాలం",
            "gaduvu", "teedi", "teduvu", "appudu", "kalam",
        ],
        "ta": [
            "காலக்கெடு", "தேதி", "எப்போது", "காலம்", "முடிவு",
            "kaalakkedu", "thethi", "eppothu", "kaalam", "mudivu",
        ],
        "kn": [
            "ಗಡುವು", "ದಿನಾಂಕ", "ಯಾವಾಗ", "ಅವಧಿ",
            "gaduvu", "dinaanka", "yaavaaga", "avadhi",
        ],
        "ml": [
            "അവസാന തീയതി", "തീയതി", "എപ്പോൾ", "കാലാവധി",
            "avasaana theeyathi", "theeyathi", "eppol", "kaalaavadhi",
        ],
        "bn": [
            "সময়সীমা", "তারিখ", "কখন", "শেষ তারিখ",
            "somoyseema", "tarikh", "kokhon", "shesh tarikh",
        ],
        "hi": [
            "तारीख", "तारीखें", "समय सीमा", "अंतिम तिथि", "तिथि",
        ],
    },
    Intent.GET_KEY_INFO: {
        "en": [
            "important", "key", "info", "information", "details", "highlights", "points", "main",
        ],
        "te": [
            "ముఖ్యమైన", "ముఖ్యమైనవి", "సమాచారం", "విషయాలు", "వివరాలు",
            "mukhya", "mukhyam", "samacharam", "vishayalu", "vivaraalu",
        ],
        "ta": [
            "முக்கியம்", "முக்கிய", "தகவல்", "விவரங்கள்", "புள்ளிகள்",
            "mukkiyam", "mukkiya", "thagaval", "vivarangal", "pulligal",
        ],
        "kn": [
            "ಮುಖ್ಯ", "ಮಾಹಿತಿ", "ವಿವರಗಳು", "ಅಂಶಗಳು",
            "mukhya", "maahiti", "vivaragalu", "amshagalu",
        ],
        "ml": [
            "പ്രധാനം", "വിവരങ്ങൾ", "വിശദാംശങ്ങൾ", "പോയിന്റുകൾ",
            "pradhaanam", "vivarangal", "vishadaamshangal", "pointukal",
        ],
        "bn": [
            "গুরুত্বপূর্ণ", "তথ্য", "বিবরণ", "মূল বিষয়",
            "gurutwopurno", "tothyo", "bibaron", "mul bishoy",
        ],
        "hi": [
            "जानकारी", "महत्वपूर्ण", "मुख्य", "विवरण",
        ],
    },
    Intent.WARNINGS: {
        "en": [
            "warning", "warnings", "problem", "problems", "issue", "issues", "concern", "concerns", "risk", "risks",
        ],
        "te": [
            "హెచ్చరికలు", "హెచ్చరిక", "సమస్య", "సమస్యలు", "ఆపద", "ఖతరా",
            "hechcharika", "samasya", "apada", "khatara",
        ],
        "ta": [
            "எச்சரிக்கை", "பிரச்சினை", "சிக்கல்", "ஆபத்து",
            "echarikkai", "pirachchinai", "sikkal", "aapathu",
        ],
        "kn": [
            "ಎಚ್ಚರಿಕೆ", "ಸಮಸ್ಯೆ", "ಅಪಾಯ", "ತೊಂದರೆ",
            "echcharike", "samasye", "apaaya", "tondare",
        ],
        "ml": [
            "മുന്നറിയിപ്പ്", "പ്രശ്നം", "അപകടം",
            "munnariyippu", "prashnam", "apakadam",
        ],
        "bn": [
            "সতর্কতা", "সমস্যা", "ঝুঁকি", "বিপদ",
            "sotorkota", "somosya", "jhunki", "bipod",
        ],
        "hi": [
            "चेतावनी", "चेतावनियां", "समस्या", "खतरा", "जोखिम",
        ],
    },
    Intent.GET_TYPE: {
        "en": [
            "type", "kind", "category", "classify", "classification",
        ],
        "te": [
            "రకం", "రకాలు", "విధమైన", "వర్గం", "రకమేది",
            "rakam", "vidha", "vargam",
        ],
        "ta": [
            "வகை", "பிரிவு", "வகைப்படுத்து",
            "vagai", "pirivu", "vagaipaduthu",
        ],
        "kn": [
            "ವಿಧ", "ಪ್ರಕಾರ", "ವರ್ಗ",
            "vidha", "prakaara", "varga",
        ],
        "ml": [
            "തരം", "വിഭാഗം", "തരം തിരിക്കുക",
            "tharam", "vibhaagam", "tharam thirikkuka",
        ],
        "bn": [
            "ধরণ", "প্রকার", "শ্রেণী",
            "dhoron", "prokar", "shreni",
        ],
        "hi": [
            "प्रकार", "किस्म", "श्रेणी",
        ],
    },
    Intent.GET_ACTIONS: {
        "en": [
            "action", "actions", "todo", "step", "steps", "do",
        ],
        "te": [
            "చేయవలసిన", "చేయాలి", "క్రమం", "పయనాలు", "సూచన",
            "cheya", "cheyavalu", "kramamaa", "payana", "suuchana",
        ],
        "ta": [
            "செயல்", "செய்ய வேண்டியவை", "படி", "என்ன செய்ய",
            "seyal", "seyya vendiyavai", "padi", "enna seyya",
        ],
        "kn": [
            "ಕ್ರಿಯೆ", "ಹೆಜ್ಜೆ", "ಏನು ಮಾಡಬೇಕು",
            "kriye", "hejje", "enu maadabeku",
        ],
        "ml": [
            "നടപടി", "ഘട്ടങ്ങൾ", "എന്ത് ചെയ്യണം",
            "nadapadi", "ghattangal", "enthu cheyyaNam",
        ],
        "bn": [
            "কাজ", "পদক্ষেপ", "কী করতে হবে",
            "kaaj", "podokkhep", "ki korte hobe",
        ],
        "hi": [
            "कार्रवाई", "कदम", "क्या करें",
        ],
    },
    Intent.GET_AMOUNT: {
        "en": [
            "amount", "money", "price", "cost", "fee", "payment", "pay", "total", "rupees", "dollars",
        ],
        "te": [
            "అంతా", "ఆ", "ధర", "ధరలు", "ఖర్చు", "సరిపెట్టుకో", "చెల్లించు",
            "anta", "dhara", "kharchu", "sari", "chellinca",
        ],
        "ta": [
            "தொகை", "விலை", "செலவு", "கட்டணம்", "ரூபாய்",
            "thogai", "vilai", "selavu", "kattanam", "roopaai",
        ],
        "kn": [
            "ಮೊತ್ತ", "ಬೆಲೆ", "ಖರ್ಚು", "ಶುಲ್ಕ", "ರೂಪಾಯಿ",
            "motta", "bele", "kharchu", "shulka", "roopayi",
        ],
        "ml": [
            "തുക", "വില", "ചെലവ്", "ഫീസ്", "രൂപ",
            "thuka", "vila", "chelavu", "fees", "roopa",
        ],
        "bn": [
            "পরিমাণ", "দাম", "খরচ", "ফি", "টাকা",
            "porimaan", "daam", "khoroch", "fee", "taka",
        ],
        "hi": [
            "राशि", "कीमत", "शुल्क", "रुपये", "भुगतान",
        ],
    },
    Intent.STOP: {
        "en": [
            "stop", "pause", "quiet", "silence", "cancel", "enough", "ok", "okay", "thanks", "thank",
        ],
        "te": [
            "ఆపు", "నిలిపివేయు", "సరిగా", "సరి", "ఆపేసేయు",
            "aapu", "nilipuvu", "sariga", "aapeseyu",
        ],
        "ta": [
            "நிறுத்து", "போதும்", "நன்றி", "சரி",
            "niruthu", "pothum", "nandri", "sari",
        ],
        "kn": [
            "ನಿಲ್ಲಿಸು", "ಸಾಕು", "ಧನ್ಯವಾದ", "ಸರಿ",
            "nillisu", "saaku", "dhanyavaada", "sari",
        ],
        "ml": [
            "നിർത്തുക", "മതി", "നന്ദി", "ശരി",
            "nirthuka", "mathi", "nandi", "shari",
        ],
        "bn": [
            "থামো", "যথেষ্ট", "ধন্যবাদ", "ঠিক আছে",
            "thamo", "jotheshto", "dhonnobad", "thik ache",
        ],
        "hi": [
            "रुको", "रुकें", "बंद करो", "धन्यवाद",
        ],
    },
    Intent.HELP: {
        "en": [
            "help", "commands", "options", "how", "what can",
        ],
        "te": [
            "సహాయం", "సహాయ", "ఆదేశాలు", "ఎలా", "ఏమిటి", "గురించి",
            "sahayam", "ela", "emiti", "aadeshalu",
        ],
        "ta": [
            "உதவி", "கட்டளைகள்", "எப்படி", "என்ன",
            "udhavi", "kattalaikal", "eppadi", "enna",
        ],
        "kn": [
            "ಸಹಾಯ", "ಆದೇಶಗಳು", "ಹೇಗೆ", "ಏನು",
            "sahaaya", "aadeshagalu", "hege", "enu",
        ],
        "ml": [
            "സഹായം", "കമാൻഡുകൾ", "എങ്ങനെ", "എന്ത്",
            "sahaayam", "kammandukal", "engane", "enthu",
        ],
        "bn": [
            "সাহায্য", "কমান্ড", "কীভাবে", "কী",
            "sahajyo", "command", "kibhabe", "ki",
        ],
        "hi": [
            "मदद", "सहायता", "आदेश",
        ],
    },
    Intent.REPEAT: {
        "en": [
            "repeat", "again", "pardon", "sorry", "once more",
        ],
        "te": [
            "నిరిక్షించు", "మళ్లీ", "మరోసారి", "పునరావృత్తి", "అది",
            "nirikshinchu", "malli", "marosari", "punaraavritti",
        ],
        "ta": [
            "மீண்டும்", "திரும்ப", "மன்னிக்கவும்",
            "meendum", "thirumba", "mannikkavum",
        ],
        "kn": [
            "ಮತ್ತೊಮ್ಮೆ", "ಪುನರಾವರ್ತಿಸು", "ಕ್ಷಮಿಸಿ",
            "mattomme", "punaraavardhisu", "kshamisi",
        ],
        "ml": [
            "ആവർത്തിക്കുക", "വീണ്ടും", "ക്ഷമിക്കണം",
            "aavarththikkuka", "veendum", "kshamikkaNam",
        ],
        "bn": [
            "আবার", "পুনরায়", "মাফ করবেন",
            "aabar", "punoraye", "maaf korben",
        ],
        "hi": [
            "दोहराओ", "दोबारा", "फिर से",
        ],
    },
    Intent.DOWNLOAD: {
        "en": [
            "download", "save", "export", "pdf",
        ],
        "te": [
            "డౌన్‌లోడ్", "సేవ్", "నిల్వ చేయు", "వెలిపెట్టు", "ఎక్స్‌పోర్ట్",
            "download", "save", "nilva", "velipedu", "export",
        ],
        "ta": [
            "பதிவிறக்கம்", "சேமி", "ஏற்றுமதி",
            "pathivirakkam", "saemi", "erumathi",
        ],
        "kn": [
            "ಡೌನ್‌ಲೋಡ್", "ಉಳಿಸು", "ರಫ್ತು",
            "download", "ulisu", "raphtu",
        ],
        "ml": [
            "ഡൗൺലോഡ്", "സേവ്", "എക്സ്പോർട്ട്",
            "download", "save", "export",
        ],
        "bn": [
            "ডাউনলোড", "সংরক্ষণ", "এক্সপোর্ট",
            "download", "shongrokkhon", "export",
        ],
        "hi": [
            "डाउनलोड", "सहेजो",
        ],
    },
    Intent.SHARE: {
        "en": [
            "share", "send", "link",
        ],
        "te": [
            "పంచుకో", "పంపించు", "లింక్", "పంచు", "పంపుతూ",
            "panchuko", "pampinchu", "panchu", "link",
        ],
        "ta": [
            "பகிர்", "அனுப்பு", "இணைப்பு",
            "pagir", "anuppu", "inaippu",
        ],
        "kn": [
            "ಹಂಚು", "ಕಳುಹಿಸು", "ಲಿಂಕ್",
            "hanchu", "kaluhisu", "link",
        ],
        "ml": [
            "പങ്കിടുക", "അയയ്ക്കുക", "ലിങ്ക്",
            "pangiduka", "ayaykkuka", "link",
        ],
        "bn": [
            "শেয়ার", "পাঠাও", "লিংক",
            "share", "pathao", "link",
        ],
        "hi": [
            "शेयर", "भेजो",
        ],
    },
    Intent.READ_FULL: {
        "en": [
            "full", "everything", "all", "entire", "complete", "whole",
        ],
        "te": [
            "పూర్తిగా", "అందరికి", "సంపూర్ణ", "మొత్తం", "సమ్మతుకు",
            "purtiga", "sampurna", "mottam", "andariki",
        ],
        "ta": [
            "முழு", "எல்லாம்", "முழுமையான", "மொத்த",
            "muzhu", "ellaam", "mulumaiyaana", "motha",
        ],
        "kn": [
            "ಪೂರ್ಣ", "ಎಲ್ಲ", "ಸಂಪೂರ್ಣ", "ಮೊತ್ತ",
            "poorna", "ella", "sampoorna", "motta",
        ],
        "ml": [
            "മുഴുവൻ", "എല്ലാം", "സമ്പൂർണ്ണം",
            "muzhuvan", "ellaam", "sampoornnam",
        ],
        "bn": [
            "পুরো", "সব", "সম্পূর্ণ", "মোট",
            "puro", "sob", "shompurno", "mot",
        ],
        "hi": [
            "पूरा", "संपूर्ण", "सब कुछ",
        ],
    },
    Intent.TRANSLATE: {
        "en": [
            "translate", "telugu", "hindi", "tamil", "kannada", "malayalam", "language",
        ],
        "te": [
            "అనువాదం", "భాష", "మార్పు చేయు", "ఆంధ్ర", "హిందీ", "తమిళ్",
            "anuvvadham", "bhasha", "maarpu", "andhra", "hindi", "tamil",
        ],
        "ta": [
            "மொழிபெயர்", "மொழி", "தெலுங்கு", "இந்தி", "கன்னடம்", "மலையாளம்",
            "mozhipeyar", "mozhi", "telungu", "inthi", "kannadam", "malaiyaalam",
        ],
        "kn": [
            "ಭಾಷಾಂತರ", "ಭಾಷೆ", "ತೆಲುಗು", "ಹಿಂದಿ", "ತಮಿಳು", "ಮಲಯಾಳಂ",
            "bhaashaantara", "bhaashe", "telugu", "hindi", "tamilu", "malayaalam",
        ],
        "ml": [
            "വിവർത്തനം", "ഭാഷ", "തെലുങ്ക്", "ഹിന്ദി", "തമിഴ്", "കന്നഡ",
            "vivartthanam", "bhaasha", "telungu", "hindi", "tamizh", "kannada",
        ],
        "bn": [
            "অনুবাদ", "ভাষা", "তেলুগু", "হিন্দি", "তামিল", "কন্নড়", "মালায়ালাম",
            "onubad", "bhasha", "telugu", "hindi", "tamil", "kannada", "malayalam",
        ],
        "hi": [
            "अनुवाद", "भाषा",
        ],
    },
}

# Language names recognised in "translate to ..." commands, in scan order
VOICE_LANGUAGES: Dict[str, str] = {
    "telugu": "te-IN",
    "hindi": "hi-IN",
    "tamil": "ta-IN",
    "kannada": "kn-IN",
    "malayalam": "ml-IN",
    "marathi": "mr-IN",
    "bengali": "bn-IN",
    "gujarati": "gu-IN",
    "punjabi": "pa-IN",
    "english": "en-IN",
}

DEFAULT_TRANSLATE_LANGUAGE = "hindi"


# Languages a command can be spoken in, with a sample trigger for each
COMMAND_LANGUAGES: List[Dict[str, str]] = [
    {"code": "en-IN", "name": "English"},
    {"code": "te-IN", "name": "Telugu", "hint": "సారాంశం"},
    {"code": "hi-IN", "name": "Hindi", "hint": "सारांश"},
    {"code": "ta-IN", "name": "Tamil", "hint": "சுருக்கம்"},
    {"code": "kn-IN", "name": "Kannada", "hint": "ಸಾರಾಂಶ"},
    {"code": "ml-IN", "name": "Malayalam", "hint": "സംഗ്രഹം"},
    {"code": "bn-IN", "name": "Bengali", "hint": "সারসংক্ষেপ"},
]

# Short commands to suggest while listening, per command locale
QUICK_HINTS: Dict[str, List[Dict[str, str]]] = {
    "en-IN": [
        {"text": "Summary", "meaning": "Read summary"},
        {"text": "Deadlines", "meaning": "Get dates"},
        {"text": "Key info", "meaning": "Important points"},
        {"text": "Warnings", "meaning": "Problems"},
        {"text": "Download", "meaning": "Save PDF"},
        {"text": "Share", "meaning": "Share doc"},
        {"text": "Stop", "meaning": "Stop speaking"},
        {"text": "Help", "meaning": "All commands"},
    ],
    "te-IN": [
        {"text": "సారాంశం", "meaning": "Summary"},
        {"text": "గడువు", "meaning": "Deadlines"},
        {"text": "ముఖ్యమైన", "meaning": "Key info"},
        {"text": "హెచ్చరికలు", "meaning": "Warnings"},
        {"text": "డౌన్‌లోడ్", "meaning": "Download"},
        {"text": "పంచుకో", "meaning": "Share"},
        {"text": "ఆపు", "meaning": "Stop"},
        {"text": "సహాయం", "meaning": "Help"},
    ],
    "hi-IN": [
        {"text": "सारांश", "meaning": "Summary"},
        {"text": "तारीख", "meaning": "Deadlines"},
        {"text": "जानकारी", "meaning": "Key info"},
        {"text": "चेतावनी", "meaning": "Warnings"},
        {"text": "डाउनलोड", "meaning": "Download"},
        {"text": "शेयर", "meaning": "Share"},
        {"text": "रुको", "meaning": "Stop"},
        {"text": "मदद", "meaning": "Help"},
    ],
    "ta-IN": [
        {"text": "சுருக்கம்", "meaning": "Summary"},
        {"text": "காலக்கெடு", "meaning": "Deadlines"},
        {"text": "முக்கியம்", "meaning": "Key info"},
        {"text": "எச்சரிக்கை", "meaning": "Warnings"},
        {"text": "பதிவிறக்கம்", "meaning": "Download"},
        {"text": "பகிர்", "meaning": "Share"},
        {"text": "நிறுத்து", "meaning": "Stop"},
        {"text": "உதவி", "meaning": "Help"},
    ],
    "kn-IN": [
        {"text": "ಸಾರಾಂಶ", "meaning": "Summary"},
        {"text": "ಗಡುವು", "meaning": "Deadlines"},
        {"text": "ಮಾಹಿತಿ", "meaning": "Key info"},
        {"text": "ಎಚ್ಚರಿಕೆ", "meaning": "Warnings"},
        {"text": "ಡೌನ್‌ಲೋಡ್", "meaning": "Download"},
        {"text": "ಹಂಚು", "meaning": "Share"},
        {"text": "ನಿಲ್ಲಿಸು", "meaning": "Stop"},
        {"text": "ಸಹಾಯ", "meaning": "Help"},
    ],
    "ml-IN": [
        {"text": "സംഗ്രഹം", "meaning": "Summary"},
        {"text": "തീയതി", "meaning": "Deadlines"},
        {"text": "വിവരങ്ങൾ", "meaning": "Key info"},
        {"text": "മുന്നറിയിപ്പ്", "meaning": "Warnings"},
        {"text": "ഡൗൺലോഡ്", "meaning": "Download"},
        {"text": "പങ്കിടുക", "meaning": "Share"},
        {"text": "നിർത്തുക", "meaning": "Stop"},
        {"text": "സഹായം", "meaning": "Help"},
    ],
    "bn-IN": [
        {"text": "সারসংক্ষেপ", "meaning": "Summary"},
        {"text": "সময়সীমা", "meaning": "Deadlines"},
        {"text": "তথ্য", "meaning": "Key info"},
        {"text": "সতর্কতা", "meaning": "Warnings"},
        {"text": "ডাউনলোড", "meaning": "Download"},
        {"text": "শেয়ার", "meaning": "Share"},
        {"text": "থামো", "meaning": "Stop"},
        {"text": "সাহায্য", "meaning": "Help"},
    ],
}


def iter_patterns() -> List[Tuple[Intent, str]]:
    """Flatten the catalog into (intent, lowercased trigger) pairs in scan order"""
    pairs = []
    for intent, groups in INTENT_PATTERNS.items():
        for triggers in groups.values():
            pairs.extend((intent, trigger.lower()) for trigger in triggers)
    return pairs


def supported_intents() -> List[str]:
    """Get list of supported intents, including the fallback"""
    return [intent.value for intent in INTENT_PATTERNS] + [Intent.UNKNOWN.value]
