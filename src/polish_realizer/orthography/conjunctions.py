"""
Polish subordinating conjunctions that are always preceded by a comma.
"""

CONJUNCTIONS_COMMA = frozenset({
    "aby", "acz", "aczkolwiek", "albowiem", "azali", "aż", "ażeby", "bo", "boć", "bowiem",
    "by", "byle", "byleby", "chociaż", "chociażby", "choć", "choćby", "chybaby", "chyba że",
    "co", "cokolwiek", "czy", "czyj", "dlaczego", "dlatego", "dlatego że", "dokąd", "dokądkolwiek",
    "dopiero", "dopiero gdy", "dopóki", "gdy", "gdyby", "gdyż", "gdzie", "gdziekolwiek", "ile",
    "ilekolwiek", "ilekroć", "ile razy", "ile że", "im", "iż", "iżby", "jak", "jakby", "jak gdyby",
    "jaki", "jakikolwiek", "jakkolwiek", "jako", "jakoby", "jako że", "jakżeby", "jeśli", "jeśliby",
    "jeżeli", "jeżeliby", "kędy", "kiedy", "kiedykolwiek", "kiedyż", "kim", "kogo", "komu", "kto",
    "ktokolwiek", "którędy", "który", "ledwie", "ledwo", "mimo iż", "mimo że", "na co", "niech",
    "nim", "odkąd", "o ile", "po co", "po czym", "podczas gdy", "pomimo iż", "pomimo że",
    "ponieważ", "póki", "przy czym", "skąd", "skądkolwiek", "skoro", "tak jak", "tylko że",
    "tym bardziej że", "w miarę jak", "wprzód nim", "w razie gdyby", "za co", "zaledwie",
    "zanim", "zwłaszcza gdy", "zwłaszcza jeżeli", "zwłaszcza kiedy", "zwłaszcza że", "że",
    "że aż", "żeby",
})

# Tokens that already join a subordinate clause to what precedes it.
COORDINATORS = frozenset({"i", "oraz"})


def needs_comma(text: str) -> bool:
    """True when ``text`` is exactly a subordinator."""
    return text in CONJUNCTIONS_COMMA


def starts_with_coordinator(text: str) -> bool:
    return text.split(" ", 1)[0] in COORDINATORS
