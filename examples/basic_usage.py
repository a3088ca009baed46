#!/usr/bin/env python3
"""
Basic redpen Usage Example

This example demonstrates the core workflow:
1. Build a pipeline from a word list
2. Check a text and inspect the misspelled words
3. Ask why a word was accepted or rejected
4. Render highlighted HTML
"""

from pathlib import Path

from redpen import CheckerConfig, classify_word, create_pipeline

TEXT = """\
In the mid-1970s, the dog's owners didn't notice the mispelled sign.
Their neighbours' cats, numbering 1,204, were well-known in the 1980s.
"""


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Build a pipeline
    # ─────────────────────────────────────────────────────────────────────────

    words = Path("/usr/share/dict/words")
    if words.exists():
        pipeline = create_pipeline(words)
    else:
        # Fall back to pyspellchecker's bundled English list
        pipeline = create_pipeline(builtin_language="en")

    print(f"Dictionary: {len(pipeline.dictionary):,} words from {pipeline.dictionary.source}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Check text
    # ─────────────────────────────────────────────────────────────────────────

    result = pipeline.check(TEXT)
    print(f"Checked {result.stats.words_checked} words")
    for token in result.invalid_tokens:
        print(f"  {token.text_in(TEXT)!r} at offset {token.start}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Explain verdicts
    # ─────────────────────────────────────────────────────────────────────────

    for word in ["mid-1970s", "dog's", "didn't", "1,204", "p34r"]:
        verdict = classify_word(word, pipeline.dictionary)
        print(f"  {word:<10} {'ok' if verdict.valid else 'FLAGGED':<8} ({verdict.rule.value})")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Render HTML (large inputs are checked on several workers)
    # ─────────────────────────────────────────────────────────────────────────

    pipeline.config = CheckerConfig(workers=4, parallel_threshold=0)
    html = pipeline.process_text(TEXT * 1000)
    Path("output.html").write_text(html)
    print(f"Wrote output.html ({len(html):,} characters)")


if __name__ == "__main__":
    main()
