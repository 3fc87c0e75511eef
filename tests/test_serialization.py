import json

from MarkPreview.markdown_parser import segment
from MarkPreview.serialization import to_dict, to_json


def test_to_dict_structure():
    document, registry = segment("# T\n- [a](http://a)\n```py\nx\n```\n---")
    data = to_dict(document, registry)
    assert data["blocks"][0] == {"type": "Heading", "level": 1, "spans": [{"type": "PlainText", "text": "T"}]}
    assert data["blocks"][1] == {
        "type": "ListBlock",
        "ordered": False,
        "items": [[{"type": "Link", "url": "http://a", "label": "a", "footnote_index": 1}]],
    }
    assert data["blocks"][2] == {"type": "CodeBlock", "language": "py", "content": "x\n"}
    assert data["blocks"][3] == {"type": "HorizontalRule"}
    assert data["footnotes"] == [{"index": 1, "url": "http://a", "title": "a"}]


def test_to_json_is_deterministic():
    document, registry = segment("**x** [y](http://y)")
    first = to_json(document, registry)
    assert first == to_json(*segment("**x** [y](http://y)"))
    assert json.loads(first)["blocks"][0]["spans"][0] == {"type": "Bold", "text": "x"}
