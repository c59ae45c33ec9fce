from app.script_detector import detect_script, is_in_script, language_base


def test_language_base():
    assert language_base("te-IN") == "te"
    assert language_base("EN") == "en"
    assert language_base("") == ""


def test_is_in_script_matches_own_script():
    assert is_in_script("సారాంశం", "te")
    assert is_in_script("सारांश", "hi")
    assert is_in_script("சுருக்கம்", "ta")
    assert is_in_script("ಸಾರಾಂಶ", "kn")
    assert is_in_script("സംഗ്രഹം", "ml")
    assert is_in_script("সারসংক্ষেপ", "bn")


def test_is_in_script_rejects_other_scripts():
    assert not is_in_script("सारांश", "te")
    assert not is_in_script("Summary", "hi")
    assert not is_in_script("", "te")


def test_is_in_script_unknown_language():
    assert not is_in_script("Summary", "en")
    assert not is_in_script("सारांश", "mr")


def test_detect_script():
    assert detect_script("नमस्ते") == "hi"
    assert detect_script("Bill: సారాంశం") == "te"
    assert detect_script("plain text") is None
