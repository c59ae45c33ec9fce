"""Localized response templates.

A template's ``with_data`` is a format string taking ``{data}``; it is only
used when the data is already written in the locale's script. ``no_data`` is
spoken when the intent has nothing to report or needs no data at all.
"""

from typing import Dict, NamedTuple, Optional

from .models import Intent


class ResponseTemplate(NamedTuple):
    with_data: Optional[str]
    no_data: str


_TELUGU: Dict[Intent, ResponseTemplate] = {
    Intent.READ_SUMMARY: ResponseTemplate(
        "ఇదిగో సారాంశం: {data}",
        "ఈ డాక్యుమెంట్‌కి సారాంశం అందుబాటులో లేదు. దయచేసి విశ్లేషణ పూర్తయ్యే వరకు వేచి ఉండండి.",
    ),
    Intent.GET_DEADLINES: ResponseTemplate(
        "ఈ డాక్యుమెంట్‌లో గడువులు కనుగొన్నాను. {data}",
        "ఈ డాక్యుమెంట్‌లో గడువులు కనుగొనబడలేదు.",
    ),
    Intent.GET_KEY_INFO: ResponseTemplate(
        "ముఖ్యమైన సమాచారం ఇక్కడ ఉంది: {data}",
        "ఈ డాక్యుమెంట్ నుండి ముఖ్యమైన సమాచారం ఇంకా తీయబడలేదు.",
    ),
    Intent.GET_TYPE: ResponseTemplate(
        "ఇది {data} డాక్యుమెంట్.",
        "డాక్యుమెంట్ రకాన్ని నిర్ధారించలేకపోయాను.",
    ),
    Intent.GET_ACTIONS: ResponseTemplate(
        "సూచించిన చర్యలు ఇక్కడ ఉన్నాయి: {data}",
        "ఈ డాక్యుమెంట్‌కు నిర్దిష్ట చర్యలు అవసరం లేదు.",
    ),
    Intent.GET_AMOUNT: ResponseTemplate(
        "ఈ మొత్తం సమాచారం కనుగొన్నాను: {data}",
        "ఈ డాక్యుమెంట్‌లో డబ్బు మొత్తాలు కనుగొనబడలేదు.",
    ),
    Intent.WARNINGS: ResponseTemplate(
        "హెచ్చరిక! {data}",
        "ఈ డాక్యుమెంట్‌లో హెచ్చరికలు లేదా ఆందోళనలు కనుగొనబడలేదు.",
    ),
    Intent.STOP: ResponseTemplate(
        None,
        "సరే, ఆపుతున్నాను.",
    ),
    Intent.HELP: ResponseTemplate(
        None,
        "మీరు తెలుగులో మాట్లాడవచ్చు! ఈ ఆదేశాలు ప్రయత్నించండి: సారాంశం, గడువులు, ముఖ్యమైన, హెచ్చరికలు, ఆపు.",
    ),
    Intent.REPEAT: ResponseTemplate(
        "{data}",
        "ఇంకా పునరావృతం చేయడానికి ఏమీ లేదు. ముందుగా నన్ను ఏదైనా అడగండి.",
    ),
    Intent.DOWNLOAD: ResponseTemplate(
        None,
        "డౌన్‌లోడ్ ఆప్షన్ తెరుస్తున్నాను. డాక్యుమెంట్‌ను సేవ్ చేయడానికి డౌన్‌లోడ్ PDF బటన్ క్లిక్ చేయండి.",
    ),
    Intent.SHARE: ResponseTemplate(
        None,
        "షేర్ ఆప్షన్ తెరుస్తున్నాను. ఈ డాక్యుమెంట్‌ను షేర్ చేయడానికి షేర్ బటన్ క్లిక్ చేయండి.",
    ),
    Intent.READ_FULL: ResponseTemplate(
        "డాక్యుమెంట్ టెక్స్ట్ ఇక్కడ ఉంది: {data}",
        "ఈ డాక్యుమెంట్ నుండి టెక్స్ట్ ఇంకా తీయబడలేదు.",
    ),
    Intent.TRANSLATE: ResponseTemplate(
        "సరే, {data} లోకి అనువదిస్తాను. పూర్తి అనువాదం వినడానికి యాప్‌లో అనువాద బటన్ ఉపయోగించండి.",
        "అనువాదం కోసం దయచేసి భాషను ఎంచుకోండి.",
    ),
    Intent.UNKNOWN: ResponseTemplate(
        None,
        "క్షమించండి, నాకు అర్థం కాలేదు. అందుబాటులో ఉన్న ఆదేశాలను వినడానికి సహాయం అని చెప్పండి.",
    ),
}

_HINDI: Dict[Intent, ResponseTemplate] = {
    Intent.READ_SUMMARY: ResponseTemplate(
        "यहाँ सारांश है: {data}",
        "इस दस्तावेज़ के लिए सारांश उपलब्ध नहीं है। कृपया विश्लेषण पूर्ण होने तक प्रतीक्षा करें।",
    ),
    Intent.GET_DEADLINES: ResponseTemplate(
        "इस दस्तावेज़ में समय सीमाएं मिलीं। {data}",
        "इस दस्तावेज़ में कोई समय सीमा नहीं मिली।",
    ),
    Intent.GET_KEY_INFO: ResponseTemplate(
        "यहाँ महत्वपूर्ण जानकारी है: {data}",
        "इस दस्तावेज़ से अभी तक कोई महत्वपूर्ण जानकारी नहीं निकाली गई।",
    ),
    Intent.GET_TYPE: ResponseTemplate(
        "यह एक {data} दस्तावेज़ है।",
        "दस्तावेज़ का प्रकार निर्धारित नहीं कर सका।",
    ),
    Intent.GET_ACTIONS: ResponseTemplate(
        "यहाँ सुझाई गई कार्रवाइयां हैं: {data}",
        "इस दस्तावेज़ के लिए कोई विशेष कार्रवाई आवश्यक नहीं है।",
    ),
    Intent.GET_AMOUNT: ResponseTemplate(
        "यह राशि जानकारी मिली: {data}",
        "इस दस्तावेज़ में कोई राशि नहीं मिली।",
    ),
    Intent.WARNINGS: ResponseTemplate(
        "चेतावनी! {data}",
        "इस दस्तावेज़ में कोई चेतावनी या चिंताएं नहीं मिलीं।",
    ),
    Intent.STOP: ResponseTemplate(
        None,
        "ठीक है, रुक रहा हूं।",
    ),
    Intent.HELP: ResponseTemplate(
        None,
        "आप हिंदी में बोल सकते हैं! ये आदेश आज़माएं: सारांश, समय सीमा, महत्वपूर्ण, चेतावनी, रुको।",
    ),
    Intent.REPEAT: ResponseTemplate(
        "{data}",
        "अभी दोहराने के लिए कुछ नहीं है। पहले मुझसे कुछ पूछें।",
    ),
    Intent.DOWNLOAD: ResponseTemplate(
        None,
        "डाउनलोड विकल्प खोल रहा हूं। दस्तावेज़ सहेजने के लिए PDF डाउनलोड बटन क्लिक करें।",
    ),
    Intent.SHARE: ResponseTemplate(
        None,
        "शेयर विकल्प खोल रहा हूं। इस दस्तावेज़ को शेयर करने के लिए शेयर बटन क्लिक करें।",
    ),
    Intent.READ_FULL: ResponseTemplate(
        "यहाँ दस्तावेज़ का पाठ है: {data}",
        "इस दस्तावेज़ से अभी तक कोई पाठ नहीं निकाला गया।",
    ),
    Intent.TRANSLATE: ResponseTemplate(
        "ठीक है, {data} में अनुवाद करूंगा। पूर्ण अनुवाद सुनने के लिए ऐप में अनुवाद बटन का उपयोग करें।",
        "कृपया अनुवाद के लिए भाषा चुनें।",
    ),
    Intent.UNKNOWN: ResponseTemplate(
        None,
        "क्षमा करें, मुझे समझ नहीं आया। उपलब्ध आदेशों को सुनने के लिए मदद कहें।",
    ),
}

_TAMIL: Dict[Intent, ResponseTemplate] = {
    Intent.READ_SUMMARY: ResponseTemplate(
        "இதோ சுருக்கம்: {data}",
        "இந்த ஆவணத்திற்கு சுருக்கம் கிடைக்கவில்லை. பகுப்பாய்வு முடியும் வரை காத்திருக்கவும்.",
    ),
    Intent.GET_DEADLINES: ResponseTemplate(
        "இந்த ஆவணத்தில் காலக்கெடுக்கள் கண்டறியப்பட்டன. {data}",
        "இந்த ஆவணத்தில் காலக்கெடுக்கள் இல்லை.",
    ),
    Intent.GET_KEY_INFO: ResponseTemplate(
        "முக்கியமான தகவல் இங்கே: {data}",
        "இந்த ஆவணத்திலிருந்து முக்கிய தகவல் இன்னும் எடுக்கப்படவில்லை.",
    ),
    Intent.GET_TYPE: ResponseTemplate(
        "இது ஒரு {data} ஆவணம்.",
        "ஆவண வகையை தீர்மானிக்க முடியவில்லை.",
    ),
    Intent.GET_ACTIONS: ResponseTemplate(
        "பரிந்துரைக்கப்பட்ட நடவடிக்கைகள்: {data}",
        "இந்த ஆவணத்திற்கு குறிப்பிட்ட நடவடிக்கைகள் தேவையில்லை.",
    ),
    Intent.GET_AMOUNT: ResponseTemplate(
        "இந்த தொகை தகவல் கண்டறியப்பட்டது: {data}",
        "இந்த ஆவணத்தில் பணத் தொகைகள் இல்லை.",
    ),
    Intent.WARNINGS: ResponseTemplate(
        "எச்சரிக்கை! {data}",
        "இந்த ஆவணத்தில் எச்சரிக்கைகள் அல்லது கவலைகள் இல்லை.",
    ),
    Intent.STOP: ResponseTemplate(
        None,
        "சரி, நிறுத்துகிறேன்.",
    ),
    Intent.HELP: ResponseTemplate(
        None,
        "நீங்கள் தமிழில் பேசலாம்! இந்த கட்டளைகளை முயற்சிக்கவும்: சுருக்கம், காலக்கெடு, முக்கியம், எச்சரிக்கை, நிறுத்து.",
    ),
    Intent.REPEAT: ResponseTemplate(
        "{data}",
        "இன்னும் திரும்ப சொல்ல எதுவும் இல்லை. முதலில் என்னிடம் ஏதாவது கேளுங்கள்.",
    ),
    Intent.DOWNLOAD: ResponseTemplate(
        None,
        "பதிவிறக்க விருப்பத்தை திறக்கிறேன். ஆவணத்தை சேமிக்க PDF பதிவிறக்க பொத்தானை கிளிக் செய்யவும்.",
    ),
    Intent.SHARE: ResponseTemplate(
        None,
        "பகிர் விருப்பத்தை திறக்கிறேன். இந்த ஆவணத்தை பகிர பகிர் பொத்தானை கிளிக் செய்யவும்.",
    ),
    Intent.READ_FULL: ResponseTemplate(
        "ஆவண உரை இங்கே: {data}",
        "இந்த ஆவணத்திலிருந்து உரை இன்னும் எடுக்கப்படவில்லை.",
    ),
    Intent.TRANSLATE: ResponseTemplate(
        "சரி, {data} மொழியில் மொழிபெயர்க்கிறேன். முழு மொழிபெயர்ப்பை கேட்க ஆப்பில் மொழிபெயர்ப்பு பொத்தானை பயன்படுத்தவும்.",
        "மொழிபெயர்ப்புக்கு மொழியை தேர்ந்தெடுக்கவும்.",
    ),
    Intent.UNKNOWN: ResponseTemplate(
        None,
        "மன்னிக்கவும், புரியவில்லை. கிடைக்கும் கட்டளைகளை கேட்க உதவி என்று சொல்லுங்கள்.",
    ),
}

_KANNADA: Dict[Intent, ResponseTemplate] = {
    Intent.READ_SUMMARY: ResponseTemplate(
        "ಇಲ್ಲಿ ಸಾರಾಂಶವಿದೆ: {data}",
        "ಈ ಡಾಕ್ಯುಮೆಂಟ್‌ಗೆ ಸಾರಾಂಶ ಲಭ್ಯವಿಲ್ಲ. ವಿಶ್ಲೇಷಣೆ ಮುಗಿಯುವವರೆಗೆ ಕಾಯಿರಿ.",
    ),
    Intent.GET_DEADLINES: ResponseTemplate(
        "ಈ ಡಾಕ್ಯುಮೆಂಟ್‌ನಲ್ಲಿ ಗಡುವುಗಳು ಕಂಡುಬಂದಿವೆ. {data}",
        "ಈ ಡಾಕ್ಯುಮೆಂಟ್‌ನಲ್ಲಿ ಗಡುವುಗಳು ಕಂಡುಬಂದಿಲ್ಲ.",
    ),
    Intent.GET_KEY_INFO: ResponseTemplate(
        "ಮುಖ್ಯ ಮಾಹಿತಿ ಇಲ್ಲಿದೆ: {data}",
        "ಈ ಡಾಕ್ಯುಮೆಂಟ್‌ನಿಂದ ಮುಖ್ಯ ಮಾಹಿತಿ ಇನ್ನೂ ಹೊರತೆಗೆದಿಲ್ಲ.",
    ),
    Intent.GET_TYPE: ResponseTemplate(
        "ಇದು {data} ಡಾಕ್ಯುಮೆಂಟ್.",
        "ಡಾಕ್ಯುಮೆಂಟ್ ಪ್ರಕಾರವನ್ನು ನಿರ್ಧರಿಸಲು ಸಾಧ್ಯವಾಗಲಿಲ್ಲ.",
    ),
    Intent.GET_ACTIONS: ResponseTemplate(
        "ಸೂಚಿಸಿದ ಕ್ರಿಯೆಗಳು: {data}",
        "ಈ ಡಾಕ್ಯುಮೆಂಟ್‌ಗೆ ನಿರ್ದಿಷ್ಟ ಕ್ರಿಯೆಗಳು ಅಗತ್ಯವಿಲ್ಲ.",
    ),
    Intent.GET_AMOUNT: ResponseTemplate(
        "ಈ ಮೊತ್ತದ ಮಾಹಿತಿ ಕಂಡುಬಂದಿದೆ: {data}",
        "ಈ ಡಾಕ್ಯುಮೆಂಟ್‌ನಲ್ಲಿ ಹಣದ ಮೊತ್ತಗಳು ಕಂಡುಬಂದಿಲ್ಲ.",
    ),
    Intent.WARNINGS: ResponseTemplate(
        "ಎಚ್ಚರಿಕೆ! {data}",
        "ಈ ಡಾಕ್ಯುಮೆಂಟ್‌ನಲ್ಲಿ ಎಚ್ಚರಿಕೆಗಳು ಅಥವಾ ಕಾಳಜಿಗಳು ಕಂಡುಬಂದಿಲ್ಲ.",
    ),
    Intent.STOP: ResponseTemplate(
        None,
        "ಸರಿ, ನಿಲ್ಲಿಸುತ್ತಿದ್ದೇನೆ.",
    ),
    Intent.HELP: ResponseTemplate(
        None,
        "ನೀವು ಕನ್ನಡದಲ್ಲಿ ಮಾತನಾಡಬಹುದು! ಈ ಆದೇಶಗಳನ್ನು ಪ್ರಯತ್ನಿಸಿ: ಸಾರಾಂಶ, ಗಡುವು, ಮುಖ್ಯ, ಎಚ್ಚರಿಕೆ, ನಿಲ್ಲಿಸು.",
    ),
    Intent.REPEAT: ResponseTemplate(
        "{data}",
        "ಇನ್ನೂ ಪುನರಾವರ್ತಿಸಲು ಏನೂ ಇಲ್ಲ. ಮೊದಲು ನನ್ನನ್ನು ಏನಾದರೂ ಕೇಳಿ.",
    ),
    Intent.DOWNLOAD: ResponseTemplate(
        None,
        "ಡೌನ್‌ಲೋಡ್ ಆಯ್ಕೆಯನ್ನು ತೆರೆಯುತ್ತಿದ್ದೇನೆ. ಡಾಕ್ಯುಮೆಂಟ್ ಉಳಿಸಲು PDF ಡೌನ್‌ಲೋಡ್ ಬಟನ್ ಕ್ಲಿಕ್ ಮಾಡಿ.",
    ),
    Intent.SHARE: ResponseTemplate(
        None,
        "ಹಂಚು ಆಯ್ಕೆಯನ್ನು ತೆರೆಯುತ್ತಿದ್ದೇನೆ. ಈ ಡಾಕ್ಯುಮೆಂಟ್ ಹಂಚಲು ಹಂಚು ಬಟನ್ ಕ್ಲಿಕ್ ಮಾಡಿ.",
    ),
    Intent.READ_FULL: ResponseTemplate(
        "ಡಾಕ್ಯುಮೆಂಟ್ ಪಠ್ಯ ಇಲ್ಲಿದೆ: {data}",
        "ಈ ಡಾಕ್ಯುಮೆಂಟ್‌ನಿಂದ ಪಠ್ಯ ಇನ್ನೂ ಹೊರತೆಗೆದಿಲ್ಲ.",
    ),
    Intent.TRANSLATE: ResponseTemplate(
        "ಸರಿ, {data} ಭಾಷೆಗೆ ಅನುವಾದಿಸುತ್ತೇನೆ. ಪೂರ್ಣ ಅನುವಾದ ಕೇಳಲು ಆ್ಯಪ್‌ನಲ್ಲಿ ಅನುವಾದ ಬಟನ್ ಬಳಸಿ.",
        "ಅನುವಾದಕ್ಕಾಗಿ ಭಾಷೆಯನ್ನು ಆಯ್ಕೆಮಾಡಿ.",
    ),
    Intent.UNKNOWN: ResponseTemplate(
        None,
        "ಕ್ಷಮಿಸಿ, ನನಗೆ ಅರ್ಥವಾಗಲಿಲ್ಲ. ಲಭ್ಯವಿರುವ ಆದೇಶಗಳನ್ನು ಕೇಳಲು ಸಹಾಯ ಎಂದು ಹೇಳಿ.",
    ),
}

_MALAYALAM: Dict[Intent, ResponseTemplate] = {
    Intent.READ_SUMMARY: ResponseTemplate(
        "ഇതാ സംഗ്രഹം: {data}",
        "ഈ ഡോക്യുമെന്റിന് സംഗ്രഹം ലഭ്യമല്ല. വിശകലനം പൂർത്തിയാകുന്നതുവരെ കാത്തിരിക്കുക.",
    ),
    Intent.GET_DEADLINES: ResponseTemplate(
        "ഈ ഡോക്യുമെന്റിൽ അവസാന തീയതികൾ കണ്ടെത്തി. {data}",
        "ഈ ഡോക്യുമെന്റിൽ അവസാന തീയതികൾ കണ്ടെത്തിയില്ല.",
    ),
    Intent.GET_KEY_INFO: ResponseTemplate(
        "പ്രധാന വിവരങ്ങൾ ഇവിടെ: {data}",
        "ഈ ഡോക്യുമെന്റിൽ നിന്ന് പ്രധാന വിവരങ്ങൾ ഇതുവരെ എടുത്തിട്ടില്ല.",
    ),
    Intent.GET_TYPE: ResponseTemplate(
        "ഇത് ഒരു {data} ഡോക്യുമെന്റ് ആണ്.",
        "ഡോക്യുമെന്റ് തരം നിർണ്ണയിക്കാൻ കഴിഞ്ഞില്ല.",
    ),
    Intent.GET_ACTIONS: ResponseTemplate(
        "നിർദ്ദേശിച്ച നടപടികൾ: {data}",
        "ഈ ഡോക്യുമെന്റിന് പ്രത്യേക നടപടികൾ ആവശ്യമില്ല.",
    ),
    Intent.GET_AMOUNT: ResponseTemplate(
        "ഈ തുക വിവരം കണ്ടെത്തി: {data}",
        "ഈ ഡോക്യുമെന്റിൽ പണത്തുക കണ്ടെത്തിയില്ല.",
    ),
    Intent.WARNINGS: ResponseTemplate(
        "മുന്നറിയിപ്പ്! {data}",
        "ഈ ഡോക്യുമെന്റിൽ മുന്നറിയിപ്പുകളോ ആശങ്കകളോ കണ്ടെത്തിയില്ല.",
    ),
    Intent.STOP: ResponseTemplate(
        None,
        "ശരി, നിർത്തുന്നു.",
    ),
    Intent.HELP: ResponseTemplate(
        None,
        "നിങ്ങൾക്ക് മലയാളത്തിൽ സംസാരിക്കാം! ഈ കമാൻഡുകൾ പരീക്ഷിക്കുക: സംഗ്രഹം, തീയതി, പ്രധാനം, മുന്നറിയിപ്പ്, നിർത്തുക.",
    ),
    Intent.REPEAT: ResponseTemplate(
        "{data}",
        "ആവർത്തിക്കാൻ ഇതുവരെ ഒന്നുമില്ല. ആദ്യം എന്നോട് എന്തെങ്കിലും ചോദിക്കൂ.",
    ),
    Intent.DOWNLOAD: ResponseTemplate(
        None,
        "ഡൗൺലോഡ് ഓപ്ഷൻ തുറക്കുന്നു. ഡോക്യുമെന്റ് സേവ് ചെയ്യാൻ PDF ഡൗൺലോഡ് ബട്ടൺ ക്ലിക്ക് ചെയ്യുക.",
    ),
    Intent.SHARE: ResponseTemplate(
        None,
        "ഷെയർ ഓപ്ഷൻ തുറക്കുന്നു. ഈ ഡോക്യുമെന്റ് പങ്കിടാൻ ഷെയർ ബട്ടൺ ക്ലിക്ക് ചെയ്യുക.",
    ),
    Intent.READ_FULL: ResponseTemplate(
        "ഡോക്യുമെന്റ് ടെക്സ്റ്റ് ഇവിടെ: {data}",
        "ഈ ഡോക്യുമെന്റിൽ നിന്ന് ടെക്സ്റ്റ് ഇതുവരെ എടുത്തിട്ടില്ല.",
    ),
    Intent.TRANSLATE: ResponseTemplate(
        "ശരി, {data} ഭാഷയിലേക്ക് വിവർത്തനം ചെയ്യുന്നു. പൂർണ്ണ വിവർത്തനം കേൾക്കാൻ ആപ്പിൽ വിവർത്തന ബട്ടൺ ഉപയോഗിക്കുക.",
        "വിവർത്തനത്തിന് ഭാഷ തിരഞ്ഞെടുക്കുക.",
    ),
    Intent.UNKNOWN: ResponseTemplate(
        None,
        "ക്ഷമിക്കണം, എനിക്ക് മനസ്സിലായില്ല. ലഭ്യമായ കമാൻഡുകൾ കേൾക്കാൻ സഹായം എന്ന് പറയുക.",
    ),
}

_BENGALI: Dict[Intent, ResponseTemplate] = {
    Intent.READ_SUMMARY: ResponseTemplate(
        "এখানে সারসংক্ষেপ: {data}",
        "এই নথির জন্য সারসংক্ষেপ উপলব্ধ নেই। বিশ্লেষণ সম্পূর্ণ হওয়া পর্যন্ত অপেক্ষা করুন।",
    ),
    Intent.GET_DEADLINES: ResponseTemplate(
        "এই নথিতে সময়সীমা পাওয়া গেছে। {data}",
        "এই নথিতে কোনো সময়সীমা পাওয়া যায়নি।",
    ),
    Intent.GET_KEY_INFO: ResponseTemplate(
        "গুরুত্বপূর্ণ তথ্য এখানে: {data}",
        "এই নথি থেকে এখনও গুরুত্বপূর্ণ তথ্য বের করা হয়নি।",
    ),
    Intent.GET_TYPE: ResponseTemplate(
        "এটি একটি {data} নথি।",
        "নথির ধরণ নির্ধারণ করা যায়নি।",
    ),
    Intent.GET_ACTIONS: ResponseTemplate(
        "প্রস্তাবিত পদক্ষেপ: {data}",
        "এই নথির জন্য কোনো নির্দিষ্ট পদক্ষেপের প্রয়োজন নেই।",
    ),
    Intent.GET_AMOUNT: ResponseTemplate(
        "এই পরিমাণের তথ্য পাওয়া গেছে: {data}",
        "এই নথিতে কোনো অর্থের পরিমাণ পাওয়া যায়নি।",
    ),
    Intent.WARNINGS: ResponseTemplate(
        "সতর্কতা! {data}",
        "এই নথিতে কোনো সতর্কতা বা উদ্বেগ পাওয়া যায়নি।",
    ),
    Intent.STOP: ResponseTemplate(
        None,
        "ঠিক আছে, থামছি।",
    ),
    Intent.HELP: ResponseTemplate(
        None,
        "আপনি বাংলায় বলতে পারেন! এই কমান্ডগুলো চেষ্টা করুন: সারসংক্ষেপ, সময়সীমা, গুরুত্বপূর্ণ, সতর্কতা, থামো।",
    ),
    Intent.REPEAT: ResponseTemplate(
        "{data}",
        "এখনও পুনরাবৃত্তি করার কিছু নেই। প্রথমে আমাকে কিছু জিজ্ঞাসা করুন।",
    ),
    Intent.DOWNLOAD: ResponseTemplate(
        None,
        "ডাউনলোড অপশন খুলছি। নথি সংরক্ষণ করতে PDF ডাউনলোড বোতামে ক্লিক করুন।",
    ),
    Intent.SHARE: ResponseTemplate(
        None,
        "শেয়ার অপশন খুলছি। এই নথি শেয়ার করতে শেয়ার বোতামে ক্লিক করুন।",
    ),
    Intent.READ_FULL: ResponseTemplate(
        "নথির টেক্সট এখানে: {data}",
        "এই নথি থেকে এখনও টেক্সট বের করা হয়নি।",
    ),
    Intent.TRANSLATE: ResponseTemplate(
        "ঠিক আছে, {data} ভাষায় অনুবাদ করছি। সম্পূর্ণ অনুবাদ শুনতে অ্যাপে অনুবাদ বোতাম ব্যবহার করুন।",
        "অনুবাদের জন্য ভাষা নির্বাচন করুন।",
    ),
    Intent.UNKNOWN: ResponseTemplate(
        None,
        "দুঃখিত, বুঝতে পারিনি। উপলব্ধ কমান্ড শুনতে সাহায্য বলুন।",
    ),
}

LOCALIZED_TEMPLATES: Dict[str, Dict[Intent, ResponseTemplate]] = {
    "te": _TELUGU,
    "hi": _HINDI,
    "ta": _TAMIL,
    "kn": _KANNADA,
    "ml": _MALAYALAM,
    "bn": _BENGALI,
}

# Translation target names as spoken in each localized locale
LANGUAGE_NAMES: Dict[str, Dict[str, str]] = {
    "te": {
        "telugu": "తెలుగు", "hindi": "హిందీ", "tamil": "తమిళం", "kannada": "కన్నడ",
        "malayalam": "మలయాళం", "marathi": "మరాఠీ", "bengali": "బెంగాలీ",
        "gujarati": "గుజరాతీ", "punjabi": "పంజాబీ", "english": "ఇంగ్లీష్",
    },
    "hi": {
        "telugu": "तेलुगु", "hindi": "हिंदी", "tamil": "तमिल", "kannada": "कन्नड़",
        "malayalam": "मलयालम", "marathi": "मराठी", "bengali": "बंगाली",
        "gujarati": "गुजराती", "punjabi": "पंजाबी", "english": "अंग्रेज़ी",
    },
    "ta": {
        "telugu": "தெலுங்கு", "hindi": "இந்தி", "tamil": "தமிழ்", "kannada": "கன்னடம்",
        "malayalam": "மலையாளம்", "marathi": "மராத்தி", "bengali": "வங்காளம்",
        "gujarati": "குஜராத்தி", "punjabi": "பஞ்சாபி", "english": "ஆங்கிலம்",
    },
    "kn": {
        "telugu": "ತೆಲುಗು", "hindi": "ಹಿಂದಿ", "tamil": "ತಮಿಳು", "kannada": "ಕನ್ನಡ",
        "malayalam": "ಮಲಯಾಳಂ", "marathi": "ಮರಾಠಿ", "bengali": "ಬಂಗಾಳಿ",
        "gujarati": "ಗುಜರಾತಿ", "punjabi": "ಪಂಜಾಬಿ", "english": "ಇಂಗ್ಲಿಷ್",
    },
    "ml": {
        "telugu": "തെലുങ്ക്", "hindi": "ഹിന്ദി", "tamil": "തമിഴ്", "kannada": "കന്നഡ",
        "malayalam": "മലയാളം", "marathi": "മറാഠി", "bengali": "ബംഗാളി",
        "gujarati": "ഗുജറാത്തി", "punjabi": "പഞ്ചാബി", "english": "ഇംഗ്ലീഷ്",
    },
    "bn": {
        "telugu": "তেলুগু", "hindi": "হিন্দি", "tamil": "তামিল", "kannada": "কন্নড়",
        "malayalam": "মালায়ালম", "marathi": "মারাঠি", "bengali": "বাংলা",
        "gujarati": "গুজরাটি", "punjabi": "পাঞ্জাবি", "english": "ইংরেজি",
    },
}

# Appended to READ_FULL previews that were cut short
CONTINUATION_SUFFIXES: Dict[str, str] = {
    "en": "... The document continues further.",
    "te": "... డాక్యుమెంట్ మరింత కొనసాగుతుంది.",
    "hi": "... दस्तावेज़ आगे जारी है।",
    "ta": "... ஆவணம் தொடர்கிறது.",
    "kn": "... ಡಾಕ್ಯುಮೆಂಟ್ ಮುಂದುವರಿಯುತ್ತದೆ.",
    "ml": "... ഡോക്യുമെന്റ് തുടരുന്നു.",
    "bn": "... নথি আরও চলছে।",
}

ENGLISH_RESPONSES: Dict[str, str] = {
    "summary_with_data": "Here's the summary: {data}",
    "summary_no_data": "No summary available for this document. Please wait for the analysis to complete.",
    "deadlines_with_data": "I found {count} deadline{plural} in this document. {data}",
    "deadlines_no_data": "No deadlines found in this document.",
    "key_info_with_data": "Here's the key information: {data}",
    "key_info_no_data": "No key information extracted from this document yet.",
    "type_classified": "This is a {data} document.",
    "type_analysed": "This appears to be a {data} document.",
    "type_no_data": "I couldn't determine the document type.",
    "actions_with_data": "Here are the suggested actions: {data}",
    "actions_no_data": "No specific actions required for this document.",
    "amount_with_data": "I found this amount information: {data}",
    "amount_no_data": "No monetary amounts found in this document.",
    "warnings_with_data": "Warning! {data}",
    "warnings_no_data": "No warnings or concerns found in this document.",
    "full_with_data": "Here's the document text: {data}",
    "full_no_data": "No text extracted from this document yet.",
    "translate": (
        "Okay, I'll translate to {data}. "
        "Please use the translate button in the app to hear the full translation."
    ),
    "stop": "Okay, stopping.",
    "help": (
        "You can speak in English, Telugu, Hindi, Tamil, Kannada, Malayalam, or Bengali! "
        "Try saying: Read the summary, What are the deadlines, Key information, Warnings, "
        "Download PDF, Share, or Stop."
    ),
    "repeat_no_data": "Nothing to repeat yet. Try asking me something first.",
    "download": "Opening download option. Please click the Download PDF button to save the document.",
    "share": "Opening share option. Please click the Share button to share this document.",
    "unknown": (
        "Sorry, I didn't understand that. Say 'help' to hear available commands. "
        "You can speak in English, Telugu, Hindi, Tamil, Kannada, Malayalam, or Bengali."
    ),
}
