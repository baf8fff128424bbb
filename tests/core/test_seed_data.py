from toolbox.core.taxonomy import CATEGORIES
from toolbox.data import get_prompts_dataset, get_tools_dataset


def test_dataset_sizes():
    assert len(get_tools_dataset()) == 600
    assert len(get_prompts_dataset()) == 120


def test_ids_are_unique():
    tools = get_tools_dataset()
    prompts = get_prompts_dataset()

    assert len({t["id"] for t in tools}) == len(tools)
    assert len({p["id"] for p in prompts}) == len(prompts)


def test_dataset_is_deterministic():
    assert get_tools_dataset() == get_tools_dataset()
    assert get_prompts_dataset()[10] == get_prompts_dataset()[10]


def test_returned_copies_are_independent():
    tools = get_tools_dataset()
    tools[0]["name"] = "Changed"

    assert get_tools_dataset()[0]["name"] == "ChatGPT"


def test_alternatives_share_category():
    tools = get_tools_dataset()
    by_name = {}
    for tool in tools:
        by_name.setdefault(tool["name"], set()).add(tool["category"])

    for tool in tools[:50]:
        assert len(tool["alternatives"]) <= 4
        for alternative in tool["alternatives"]:
            assert tool["category"] in by_name[alternative]


def test_categories_come_from_taxonomy():
    assert {t["category"] for t in get_tools_dataset()} <= set(CATEGORIES)
