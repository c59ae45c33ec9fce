"""Corrections for common speech recognition mistakes.

Applied in order as case-insensitive substring replacements over the whole
transcript. Later rules see the output of earlier ones, so entries can chain.
A key never occurs inside its own replacement, so normalizing twice changes
nothing, and never occurs inside another intent's trigger. Longer keys come
before their prefixes.
"""

from typing import Dict

SPEECH_CORRECTIONS: Dict[str, str] = {
    # English
    "some marie": "summary",
    "some mary": "summary",
    "some merry": "summary",
    "summery": "summary",
    "samarie": "summary",
    "samari": "summary",
    "dead line": "deadline",
    "dead lines": "deadlines",
    "dad lines": "deadlines",
    "datelines": "deadlines",
    "worn ings": "warnings",
    "prob lems": "problems",
    "down load": "download",
    "dawn load": "download",
    "sher": "share",
    "sheer": "share",
    "trans late": "translate",
    "repete": "repeat",
    "re pete": "repeat",
    "stopp": "stop",
    "stap": "stop",
    "halp": "help",
    "held": "help",

    # Telugu phonetic variations
    "sarama": "saaramsam",
    "saraamsh": "saaramsam",
    "saraam": "saaram",
    "gaadu": "gaduvu",
    "gadduvu": "gaduvu",
    "tedi": "teedi",
    "samasyae": "samasye",
    "samasya": "samasye",
    "aapesu": "aapu",
    "sahayam": "sahaayam",
    "panchuku": "panchuko",
    "nilwa": "nilva",
    "kharcha": "kharchu",
    "saramsam": "saaramsam",
    "saramsha": "saaramsha",
    "gadvu": "gaduvu",
    "tedhi": "teedi",
    "thedhi": "teedi",
    "aapuu": "aapu",

    # Tamil phonetic variations
    "surukam": "surukkam",
    "surukham": "surukkam",
    "churukkam": "surukkam",
    "kaalaketu": "kaalakkedu",
    "kalakkedu": "kaalakkedu",
    "thedi": "thethi",
    "mukhiyam": "mukkiyam",
    "mukiyam": "mukkiyam",
    "echarikai": "echarikkai",
    "echarikei": "echarikkai",
    "piratchinai": "pirachchinai",
    "piracchinai": "pirachchinai",
    "nirutu": "niruthu",
    "niruttu": "niruthu",
    "podhum": "pothum",
    "podhu": "pothum",
    "udavi": "udhavi",
    "meedum": "meendum",
    "thirumpa": "thirumba",
    "pathiviraku": "pathivirakkam",
    "pagiru": "pagir",
    "anupu": "anuppu",
    "mulu": "muzhu",
    "mullu": "muzhu",
    "ellam": "ellaam",
    "mozhi peyar": "mozhipeyar",
    "mozhipeyaru": "mozhipeyar",
    "thoghai": "thogai",
    "thokai": "thogai",
    "seyyal": "seyal",
    "vaghai": "vagai",

    # Kannada phonetic variations
    "saramsh": "saransh",
    "odhu": "odu",
    "gadhuvu": "gaduvu",
    "dinanka": "dinaanka",
    "dinaamka": "dinaanka",
    "mukya": "mukhya",
    "mahiti": "maahiti",
    "mahithi": "maahiti",
    "echarike": "echcharike",
    "echarikhe": "echcharike",
    "nilisu": "nillisu",
    "nillsu": "nillisu",
    "saku": "saaku",
    "sakhu": "saaku",
    "sahaya": "sahaaya",
    "sahaaye": "sahaaya",
    "heghe": "hege",
    "mattome": "mattomme",
    "matome": "mattomme",
    "downlod": "download",
    "ulishu": "ulisu",
    "hancu": "hanchu",
    "hanccu": "hanchu",
    "kaluhishu": "kaluhisu",
    "purna": "poorna",
    "sampurna": "sampoorna",
    "bhashantara": "bhaashaantara",
    "bhashantar": "bhaashaantara",
    "bhashe": "bhaashe",
    "bhashae": "bhaashe",
    "moth": "mot",
    "belae": "bele",
    "kriya": "kriye",

    # Malayalam phonetic variations
    "sangraham": "samgraham",
    "samgrahm": "samgraham",
    "vaayikuka": "vaayikkuka",
    "vayikkuka": "vaayikkuka",
    "parayuuka": "parayuka",
    "avasana theeyathi": "avasaana theeyathi",
    "avasana tiyathi": "avasaana theeyathi",
    "tiyathi": "theeyathi",
    "theeyati": "theeyathi",
    "epol": "eppol",
    "eppolu": "eppol",
    "pradhanam": "pradhaanam",
    "pradanam": "pradhaanam",
    "vivaramgal": "vivarangal",
    "munnariyipu": "munnariyippu",
    "prasnam": "prashnam",
    "nirtuka": "nirthuka",
    "sahayum": "sahaayam",
    "kamandukal": "kammandukal",
    "engana": "engane",
    "aavarthikkuka": "aavarththikkuka",
    "avarthikkuka": "aavarththikkuka",
    "vendu": "veendum",
    "pangituka": "pangiduka",
    "ayaykuka": "ayaykkuka",
    "ayaykkuuka": "ayaykkuka",
    "muluvan": "muzhuvan",
    "elam": "ellaam",
    "sampoornam": "sampoornnam",
    "sampurnam": "sampoornnam",
    "vivarthanam": "vivartthanam",
    "vivarttanam": "vivartthanam",
    "basha": "bhasha",
    "vilaa": "vila",
    "nadapati": "nadapadi",
    "taram": "tharam",

    # Bengali phonetic variations
    "sarasankhep": "sarsankhep",
    "sarsongkhep": "sarsankhep",
    "paro": "poro",
    "bekkhya": "byakhya",
    "somoyshima": "somoyseema",
    "kokon": "kokhon",
    "gurutopurno": "gurutwopurno",
    "totho": "tothyo",
    "bibaran": "bibaron",
    "somossa": "somosya",
    "junki": "jhunki",
    "tamo": "thamo",
    "joteshto": "jotheshto",
    "dhonobad": "dhonnobad",
    "thik ase": "thik ache",
    "sahajo": "sahajyo",
    "kibabe": "kibhabe",
    "punoraya": "punoraye",
    "maph korben": "maaf korben",
    "songrokkhon": "shongrokkhon",
    "patao": "pathao",
    "puru": "puro",
    "sab": "sob",
    "sompurno": "shompurno",
    "onubod": "onubad",
    "poriman": "porimaan",
    "koroch": "khoroch",
    "tako": "taka",
    "kaj": "kaaj",
    "podokhep": "podokkhep",
    "ki korte hbe": "ki korte hobe",
    "doron": "dhoron",
    "prakar": "prokar",
    "sreni": "shreni",
}
