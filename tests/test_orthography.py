"""Tests for the orthography processor."""

import pytest

from polish_realizer.framework.elements import (
    CoordinatedPhraseElement,
    DocumentElement,
    Element,
    ListElement,
    StringElement,
)
from polish_realizer.framework.features import (
    ClauseStatus,
    DiscourseFunction,
    DocumentCategory,
    Feature,
    PhraseCategory,
)
from polish_realizer.orthography.conjunctions import CONJUNCTIONS_COMMA
from polish_realizer.orthography.processor import (
    OrthographyConfig,
    OrthographyProcessor,
    RealisationContext,
    remove_punct_space,
)


def leaf(text, function=None, appositive=False):
    element = StringElement(text, discourse_function=function)
    if appositive:
        element.set_feature(Feature.APPOSITIVE, True)
    return element


def words(*texts, function=None):
    return [leaf(text, function) for text in texts]


def sentence(*components, interrogative=False):
    element = DocumentElement(DocumentCategory.SENTENCE, components=list(components))
    if interrogative:
        element.set_feature(Feature.INTERROGATIVE, True)
    return element


def subordinate(*children):
    clause = ListElement(list(children))
    clause.set_feature(Feature.CLAUSE_STATUS, ClauseStatus.SUBORDINATE)
    return clause


@pytest.fixture
def processor():
    return OrthographyProcessor()


class TestRemovePunctSpace:
    """Tests for the final whitespace and comma cleanup."""

    @pytest.mark.parametrize("raw,expected", [
        ("pies , kot", "pies, kot"),
        ("pies,, kot", "pies, kot"),
        ("pies   kot", "pies kot"),
        ("pies  , ,kot", "pies,kot"),
        ("pies, kot", "pies, kot"),
    ])
    def test_cleanup(self, raw, expected):
        assert remove_punct_space(raw) == expected

    @pytest.mark.parametrize("raw", [
        "a  ,b", " , , ,", "x ,, ,  y", ",  ,", "a b  c ,d,,e",
    ])
    def test_idempotent(self, raw):
        once = remove_punct_space(raw)
        assert remove_punct_space(once) == once


class TestSentence:
    """Sentence capitalization and termination."""

    def test_capitalised_and_terminated(self, processor):
        realised = processor.realise(sentence(*words("pies", "śpi")))
        assert realised.realisation == "Pies śpi."
        assert realised.components == []

    def test_polish_initial_capitalised(self, processor):
        assert processor.realise(sentence(leaf("żaba"))).realisation == "Żaba."
        assert processor.realise(sentence(leaf("ósemka"))).realisation == "Ósemka."

    def test_interrogative(self, processor):
        realised = processor.realise(sentence(*words("czy", "pada"), interrogative=True))
        assert realised.realisation.endswith("pada?")

    def test_no_second_terminator(self, processor):
        assert processor.realise(sentence(leaf("Koniec."))).realisation == "Koniec."
        assert processor.realise(sentence(leaf("Czy tak?"), interrogative=True)).realisation == "Czy tak?"
        assert processor.realise(sentence(leaf("Czy tak?"))).realisation == "Czy tak?"

    def test_leading_commas_stripped(self, processor):
        assert processor.realise(sentence(leaf(", ,"), leaf("pies"))).realisation == "Pies."

    def test_trailing_commas_stripped(self, processor):
        tail = ListElement([leaf("jak zwykle", DiscourseFunction.PRE_MODIFIER, appositive=True)])
        assert processor.realise(sentence(leaf("kot"), tail)).realisation == "Kot, jak zwykle."

    def test_empty_sentence(self, processor):
        assert processor.realise(sentence()).realisation == ""

    def test_subordinator_gets_comma(self, processor):
        realised = processor.realise(sentence(*words("wiem", "że", "pada")))
        assert realised.realisation == "Wiem, że pada."

    def test_deterministic(self, processor):
        outputs = {processor.realise(sentence(*words("pies", "kot"))).realisation for _ in range(3)}
        assert outputs == {"Pies kot."}


class TestListJoins:
    """List realisation by the discourse function of the first child."""

    def test_three_postmodifiers(self, processor):
        lst = ListElement(words("pies", "kot", "chomik", function=DiscourseFunction.POST_MODIFIER))
        assert processor.realise(lst).realisation == "pies, kot oraz chomik"

    def test_two_postmodifiers(self, processor):
        lst = ListElement(words("pies", "kot", function=DiscourseFunction.POST_MODIFIER))
        assert processor.realise(lst).realisation == "pies i kot"

    def test_untagged_list_enumerates(self, processor):
        lst = ListElement(words("pies", "kot", "chomik", "żółw"))
        assert processor.realise(lst).realisation == "pies, kot, chomik oraz żółw"

    def test_enumeration_skips_empty(self, processor):
        lst = ListElement(words("pies", "", "kot", function=DiscourseFunction.MODIFIER))
        assert processor.realise(lst).realisation == "pies i kot"

    def test_single_item(self, processor):
        lst = ListElement(words("pies", function=DiscourseFunction.POST_MODIFIER))
        assert processor.realise(lst).realisation == "pies"

    def test_appositive_set_off_by_commas(self, processor):
        lst = ListElement([
            leaf("mój pies", DiscourseFunction.POST_MODIFIER),
            leaf("Burek", DiscourseFunction.POST_MODIFIER, appositive=True),
        ])
        realised = processor.realise(sentence(lst, leaf("śpi")))
        assert realised.realisation == "Mój pies, Burek, śpi."

    def test_premodifiers_joined_without_comma(self, processor):
        lst = ListElement(words("duży", "czarny", function=DiscourseFunction.PRE_MODIFIER))
        assert processor.realise(lst).realisation == "duży czarny"

    def test_premodifiers_with_comma(self):
        processor = OrthographyProcessor(OrthographyConfig(comma_sep_premodifiers=True))
        lst = ListElement(words("duży", "czarny", function=DiscourseFunction.PRE_MODIFIER))
        assert processor.realise(lst).realisation == "duży, czarny"

    def test_appositive_premodifiers_bracketed(self, processor):
        lst = ListElement([leaf("jak zwykle", DiscourseFunction.PRE_MODIFIER, appositive=True)])
        realised = processor.realise(sentence(leaf("kot"), lst, leaf("śpi")))
        assert realised.realisation == "Kot, jak zwykle, śpi."

    def test_cue_phrase_comma(self):
        processor = OrthographyProcessor(OrthographyConfig(comma_sep_cuephrase=True))
        cue = ListElement(words("na", "szczęście", function=DiscourseFunction.CUE_PHRASE))
        realised = processor.realise(sentence(cue, *words("pada")))
        assert realised.realisation == "Na szczęście, pada."

    def test_front_modifier_phrase_single_comma(self):
        processor = OrthographyProcessor(OrthographyConfig(comma_sep_cuephrase=True))
        front = ListElement(words("wczoraj", "wieczorem", function=DiscourseFunction.FRONT_MODIFIER))
        assert processor.realise(front).realisation == "wczoraj wieczorem,"

    def test_single_cue_word_gets_comma(self):
        processor = OrthographyProcessor(OrthographyConfig(comma_sep_cuephrase=True))
        assert processor.realise(leaf("niestety", DiscourseFunction.CUE_PHRASE)).realisation == "niestety,"

    def test_cue_phrase_without_config(self, processor):
        cue = ListElement(words("na", "szczęście", function=DiscourseFunction.CUE_PHRASE))
        assert processor.realise(cue).realisation == "na szczęście"

    def test_realised_list_keeps_category(self, processor):
        lst = ListElement(words("pies"), category=PhraseCategory.NOUN_PHRASE)
        assert processor.realise(lst).category is PhraseCategory.NOUN_PHRASE

    def test_empty_list(self, processor):
        assert processor.realise(ListElement()).realisation == ""


class TestSubordinateComma:
    """The subordinate clause comma is placed once per sentence."""

    def test_comma_before_subordinate_clause(self, processor):
        clause = subordinate(*words("Ania", "śpi", function=DiscourseFunction.SUBJECT))
        realised = processor.realise(sentence(*words("Jan", "mówi"), clause))
        assert realised.realisation == "Jan mówi, Ania śpi."

    def test_untagged_subordinate_clause(self, processor):
        realised = processor.realise(sentence(*words("Jan", "mówi"), subordinate(*words("Ania", "śpi"))))
        assert realised.realisation == "Jan mówi, Ania śpi."

    def test_only_once_with_nested_clauses(self, processor):
        inner = subordinate(*words("kot", "mruczy", function=DiscourseFunction.SUBJECT))
        outer = subordinate(leaf("Ania", DiscourseFunction.SUBJECT), leaf("śpi"), inner)
        realised = processor.realise(sentence(*words("Jan", "mówi"), outer))
        assert realised.realisation == "Jan mówi, Ania śpi kot mruczy."
        assert realised.realisation.count(",") == 1

    def test_no_comma_before_coordinator(self, processor):
        clause = subordinate(*words("i", "śpi", function=DiscourseFunction.SUBJECT))
        realised = processor.realise(sentence(*words("Jan", "mówi"), clause))
        assert realised.realisation == "Jan mówi i śpi."

    def test_no_comma_before_nested_coordinator(self, processor):
        nested = ListElement(words("oraz", "Ania", function=DiscourseFunction.SUBJECT))
        clause = subordinate(nested, leaf("śpi"))
        clause.children[0].set_feature(Feature.DISCOURSE_FUNCTION, DiscourseFunction.SUBJECT)
        realised = processor.realise(sentence(*words("Jan", "mówi"), clause))
        assert "," not in realised.realisation

    def test_flag_reset_per_sentence(self, processor):
        context = RealisationContext()
        first = processor.realise(
            sentence(leaf("Jan"), subordinate(*words("Ania", "śpi", function=DiscourseFunction.SUBJECT))),
            context,
        )
        second = processor.realise(
            sentence(leaf("Ola"), subordinate(*words("kot", "je", function=DiscourseFunction.SUBJECT))),
            context,
        )
        assert first.realisation == "Jan, Ania śpi."
        assert second.realisation == "Ola, kot je."

    def test_context_records_comma(self, processor):
        context = RealisationContext()
        processor.realise(subordinate(*words("Ania", "śpi", function=DiscourseFunction.SUBJECT)), context)
        assert context.subordinate_comma_set


class TestCoordinatedPhrase:
    """Coordination comma reduction."""

    def test_long_coordination(self, processor):
        coordinated = CoordinatedPhraseElement.from_coordinates(words("Jan", "Piotr", "Szymon"))
        assert processor.realise(coordinated).realisation == "Jan, Piotr i Szymon"

    def test_two_coordinates(self, processor):
        coordinated = CoordinatedPhraseElement.from_coordinates(words("Jan", "Piotr"), conjunction="lub")
        assert processor.realise(coordinated).realisation == "Jan lub Piotr"

    def test_four_coordinates(self, processor):
        coordinated = CoordinatedPhraseElement.from_coordinates(words("a", "b", "c", "d"))
        assert processor.realise(coordinated).realisation == "a, b, c i d"


class TestDocumentNodes:
    """Non-sentence document categories."""

    def test_paragraph_realised_in_place(self, processor):
        paragraph = DocumentElement(DocumentCategory.PARAGRAPH, components=[
            sentence(*words("pies", "śpi")), sentence(*words("kot", "je")),
        ])
        realised = processor.realise(paragraph)
        assert realised is paragraph
        assert [c.realisation for c in realised.components] == ["Pies śpi.", "Kot je."]

    def test_list_item_rewrapped(self, processor):
        item = DocumentElement(DocumentCategory.LIST_ITEM, components=[
            ListElement(words("pies", "kot", function=DiscourseFunction.POST_MODIFIER)),
        ])
        realised = processor.realise(item)
        assert isinstance(realised, ListElement)
        assert realised.category is DocumentCategory.LIST_ITEM
        assert realised.children[0].realisation == "pies i kot"

    def test_unknown_kind_rejected(self, processor):
        with pytest.raises(TypeError):
            processor.realise(Element())

    def test_none_passes(self, processor):
        assert processor.realise(None) is None


class TestConjunctions:
    """The subordinator table."""

    def test_known_subordinators(self):
        for word in ("ponieważ", "że", "gdy", "jeśli", "chyba że", "żeby"):
            assert word in CONJUNCTIONS_COMMA

    def test_coordinators_excluded(self):
        assert "i" not in CONJUNCTIONS_COMMA
        assert "oraz" not in CONJUNCTIONS_COMMA
