from services.prompts import COMPROMISED_PACKAGES, build_prompt


def test_prompt_contains_repository_url():
    prompt = build_prompt("https://github.com/octo/hello")
    assert "**Repository to Analyze:** https://github.com/octo/hello" in prompt


def test_prompt_lists_every_compromised_package():
    prompt = build_prompt("github.com/a/b")
    for name, first, last in COMPROMISED_PACKAGES:
        assert f"`{name}` (versions {first} - {last})" in prompt


def test_prompt_describes_attack_and_instructions():
    prompt = build_prompt("github.com/a/b")
    assert "September 2025" in prompt
    assert "post-install scripts" in prompt
    assert "`package.json` or `requirements.txt`" in prompt
    assert "JSON format" in prompt


def test_prompt_is_deterministic_and_only_interpolates_url():
    first = build_prompt("github.com/a/b")
    assert first == build_prompt("github.com/a/b")
    assert build_prompt("github.com/x/y") == first.replace("github.com/a/b", "github.com/x/y")
