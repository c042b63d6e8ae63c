"""Word lists and style-guide content used by the heuristic optimizer.

Based on the Google AI Stitch prompt guide:
https://discuss.ai.google.dev/t/stitch-prompt-guide/83844
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Lexicon:
    """Immutable keyword sets consulted by :class:`HeuristicAnalyzer`."""

    theming_keywords: tuple[str, ...]
    detailed_keywords: tuple[str, ...]
    high_level_keywords: tuple[str, ...]
    vague_words: tuple[str, ...]
    connector_words: tuple[str, ...]
    ui_vocabulary: tuple[str, ...]
    vibe_adjectives: tuple[str, ...]
    location_words: tuple[str, ...]


DEFAULT_LEXICON = Lexicon(
    theming_keywords=(
        "color", "theme", "style", "font", "background", "vibe", "modern", "minimal",
    ),
    detailed_keywords=(
        "page", "screen", "component", "button", "header", "footer", "card", "modal",
    ),
    high_level_keywords=("app for", "application", "website", "platform", "tool for"),
    vague_words=("good", "nice", "better", "improve", "make it pretty"),
    connector_words=("and", "also", "plus", "then"),
    ui_vocabulary=(
        "navigation bar", "call-to-action button", "hero section", "card layout",
        "dropdown menu", "sidebar", "footer", "header", "modal dialog",
        "form field", "input group", "tab bar", "breadcrumb", "pagination",
    ),
    vibe_adjectives=(
        "vibrant", "minimalist", "modern", "elegant", "professional",
        "playful", "serious", "clean", "bold", "subtle", "luxurious",
        "friendly", "technical", "creative", "corporate",
    ),
    location_words=("page", "screen", "section", "on the", "in the"),
)


@dataclass(frozen=True)
class StyleRule:
    id: str
    title: str
    description: str


STYLE_RULES: tuple[StyleRule, ...] = (
    StyleRule(
        id="clear-specific",
        title="Be clear and specific",
        description="Tell the model exactly what to change and how. Avoid vague instructions.",
    ),
    StyleRule(
        id="one-thing",
        title="One thing at a time",
        description="Make one or two adjustments per prompt instead of changing everything at once.",
    ),
    StyleRule(
        id="focus-screen",
        title="Focus on a screen",
        description="Target a specific screen or component rather than describing the whole app.",
    ),
    StyleRule(
        id="use-adjectives",
        title="Use adjectives",
        description='Define the mood and style with adjectives such as "vibrant" or "minimalist".',
    ),
    StyleRule(
        id="ui-keywords",
        title="UI/UX keywords",
        description='Use terms like "navigation bar", "call-to-action button", "card layout".',
    ),
    StyleRule(
        id="specific-reference",
        title="Reference elements precisely",
        description='Point at exact elements, e.g. "the primary button on the sign-up page".',
    ),
)

PROMPT_TIPS: tuple[tuple[str, str], ...] = (
    ("Start simple", "Begin with a short prompt, then refine and add detail step by step."),
    ("Don't mix", "Keep layout changes and UI component edits in separate prompts."),
    ("Iterate", "Improve over several rounds, each building on the previous result."),
    ("Watch the length", "Prompts over 5000 characters may cause components to be dropped."),
    ("Save progress", "Save the result after each successful step so you can compare and roll back."),
)

EXAMPLE_PROMPTS: tuple[tuple[str, str], ...] = (
    (
        "An app for marathon runners",
        "An app for marathon runners to engage with a community, find partners, get "
        "training advice, and find races near them. Use a vibrant and encouraging design style.",
    ),
    (
        "Make the homepage better",
        "On the homepage, add a search bar to the header and increase the size of the "
        "primary call-to-action button. Use the brand's primary blue color for the button.",
    ),
    (
        "Product page for tea store",
        "Product detail page for a Japandi-styled tea store. Sells herbal teas and ceramics. "
        "Use neutral, minimal colors with black buttons and soft, elegant typography.",
    ),
    (
        "Change the colors to blue",
        "Update the theme to dark blue as the primary color. Ensure all buttons, links, and "
        "icons reflect this new color scheme consistently across all screens.",
    ),
)
