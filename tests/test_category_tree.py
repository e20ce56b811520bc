from kurdish_vocab.config import VocabConfig
from kurdish_vocab.core.registry import build_category_tree
from kurdish_vocab.data import WORDS
from kurdish_vocab.models.category import CategoryNode, render_category_tree
from kurdish_vocab.models.word import Word


def _tree(words):
    config = VocabConfig()
    return build_category_tree(words, config.category_root_name, config.category_names)


def test_builtin_words_grouped_by_category():
    root = _tree(WORDS)
    assert root.name == "Kurdish vocabulary"
    assert root.word_indices == []
    assert [child.name for child in root.children] == ["greetings", "family", "food"]
    assert root.find("greetings").word_indices == [0, 1, 2]
    assert root.find("family").word_indices == [3, 4, 5, 6]
    assert root.find("food").word_indices == [7, 8, 9]


def test_unknown_category_is_left_out_of_tree():
    words = list(WORDS) + [Word("spas", "thanks", "phrases")]
    root = _tree(words)
    assert sorted(root.all_indices()) == list(range(len(WORDS)))
    assert root.find("phrases") is None
    assert len(words) == 11


def test_category_match_is_exact():
    root = _tree([Word("slaw", "hello", "Greetings")])
    assert root.all_indices() == []


def test_render_is_preorder_with_depth_indent():
    print("tree:", render_category_tree(_tree(WORDS)))
    assert render_category_tree(_tree(WORDS)) == [
        "- Kurdish vocabulary",
        "  - greetings",
        "  - family",
        "  - food",
    ]


def test_render_deeper_tree():
    root = CategoryNode("root")
    child = root.add_child(CategoryNode("a"))
    child.add_child(CategoryNode("a1"))
    root.add_child(CategoryNode("b"))
    assert render_category_tree(root) == ["- root", "  - a", "    - a1", "  - b"]
    assert render_category_tree(None) == []
