"""
Static reference data: archetypes, comparison pairs, fonts, palettes and the
answer → axis tables used by the signal extractor.

Archetype, font, palette and answer vectors are on the narrow scale.
Comparison pair deltas are authored on the wide scale, the way the wizard
shows them, and converted when a choice is applied.
"""

from typing import Final

from style_engine.models.axes import AXES_BY_KEY
from style_engine.models.comparison import ComparisonPair, PairOption
from style_engine.models.profile import Archetype, FontProfile, PaletteProfile

SignalTable = dict[str, dict[str, float]]


def translate_legacy_vector(raw: dict[str, float]) -> dict[str, float]:
    """
    Map vectors written against the older wizard dimensions onto the axis catalogue.

    `organic_geometric` is the same axis under its old name. `light_heavy` has no
    axis of its own: half of its pull goes to minimal, the opposite half to bold.
    Keys that match neither are dropped.
    """
    translated: dict[str, float] = {}
    for key, value in raw.items():
        if key in AXES_BY_KEY:
            translated[key] = translated.get(key, 0.0) + value
        elif key == "organic_geometric":
            translated["geometric_organic"] = translated.get("geometric_organic", 0.0) + value
        elif key == "light_heavy":
            translated["minimal_ornate"] = translated.get("minimal_ornate", 0.0) + value / 2
            translated["bold_subtle"] = translated.get("bold_subtle", 0.0) - value / 2
    return translated


# Archetypes

ARCHETYPES: Final[tuple[Archetype, ...]] = (
    Archetype(
        name="Stripe",
        axes={"modern_classic": 0.9, "bold_subtle": 0.3, "warm_cool": -0.3, "minimal_ornate": 0.8,
              "playful_serious": -0.2, "geometric_organic": 0.7, "luxury_accessible": 0.5},
        description="Technical elegance with gradient accents and pristine typography",
        website="https://stripe.com",
        personality=["Precise", "Premium", "Technical", "Clean"],
    ),
    Archetype(
        name="Linear",
        axes={"modern_classic": 0.95, "bold_subtle": 0.2, "warm_cool": -0.5, "minimal_ornate": 0.9,
              "playful_serious": -0.3, "geometric_organic": 0.8, "luxury_accessible": 0.6},
        description="Ultra-minimal dark interfaces with subtle depth",
        website="https://linear.app",
        personality=["Focused", "Minimal", "Dark", "Efficient"],
    ),
    Archetype(
        name="Notion",
        axes={"modern_classic": 0.7, "bold_subtle": -0.3, "warm_cool": 0.2, "minimal_ornate": 0.7,
              "playful_serious": 0.3, "geometric_organic": 0.2, "luxury_accessible": -0.3},
        description="Friendly minimalism with playful illustrations",
        website="https://notion.so",
        personality=["Approachable", "Clean", "Playful", "Flexible"],
    ),
    Archetype(
        name="Apple",
        axes={"modern_classic": 0.8, "bold_subtle": 0.5, "warm_cool": -0.2, "minimal_ornate": 0.9,
              "playful_serious": -0.2, "geometric_organic": 0.6, "luxury_accessible": 0.9},
        description="Premium minimalism with cinematic product focus",
        website="https://apple.com",
        personality=["Premium", "Minimal", "Innovative", "Aspirational"],
    ),
    Archetype(
        name="Mailchimp",
        axes={"modern_classic": 0.5, "bold_subtle": 0.6, "warm_cool": 0.7, "minimal_ornate": -0.2,
              "playful_serious": 0.9, "geometric_organic": -0.4, "luxury_accessible": -0.5},
        description="Playful illustrations with warm, friendly energy",
        website="https://mailchimp.com",
        personality=["Fun", "Friendly", "Quirky", "Warm"],
    ),
    Archetype(
        name="Chanel",
        axes={"modern_classic": -0.5, "bold_subtle": 0.4, "warm_cool": -0.4, "minimal_ornate": 0.3,
              "playful_serious": -0.8, "geometric_organic": 0.3, "luxury_accessible": 0.95},
        description="Timeless luxury with black, white, and gold",
        website="https://chanel.com",
        personality=["Luxurious", "Timeless", "Elegant", "Exclusive"],
    ),
    Archetype(
        name="Spotify",
        axes={"modern_classic": 0.7, "bold_subtle": 0.8, "warm_cool": 0.3, "minimal_ornate": 0.4,
              "playful_serious": 0.5, "geometric_organic": -0.2, "luxury_accessible": -0.4},
        description="Bold duotones with energetic gradients",
        website="https://spotify.com",
        personality=["Energetic", "Bold", "Youthful", "Expressive"],
    ),
    Archetype(
        name="Aesop",
        axes={"modern_classic": -0.2, "bold_subtle": -0.5, "warm_cool": 0.6, "minimal_ornate": 0.5,
              "playful_serious": -0.6, "geometric_organic": -0.5, "luxury_accessible": 0.7},
        description="Refined simplicity with warm, natural tones",
        website="https://aesop.com",
        personality=["Refined", "Natural", "Understated", "Artisanal"],
    ),
    Archetype(
        name="Nike",
        axes={"modern_classic": 0.6, "bold_subtle": 0.95, "warm_cool": 0.1, "minimal_ornate": 0.3,
              "playful_serious": 0.2, "geometric_organic": 0.2, "luxury_accessible": 0.3},
        description="Maximum impact with bold typography and high contrast",
        website="https://nike.com",
        personality=["Bold", "Powerful", "Inspiring", "Athletic"],
    ),
    Archetype(
        name="Muji",
        axes={"modern_classic": 0.3, "bold_subtle": -0.8, "warm_cool": 0.3, "minimal_ornate": 0.95,
              "playful_serious": -0.4, "geometric_organic": 0.1, "luxury_accessible": -0.2},
        description="Japanese minimalism, nothing unnecessary",
        website="https://muji.com",
        personality=["Minimal", "Calm", "Natural", "Essential"],
    ),
    Archetype(
        name="Glossier",
        axes={"modern_classic": 0.5, "bold_subtle": 0.1, "warm_cool": 0.7, "minimal_ornate": 0.4,
              "playful_serious": 0.5, "geometric_organic": -0.3, "luxury_accessible": 0.2},
        description="Soft pinks, dewy aesthetics, millennial-friendly",
        website="https://glossier.com",
        personality=["Fresh", "Approachable", "Feminine", "Modern"],
    ),
    Archetype(
        name="IBM",
        axes={"modern_classic": 0.3, "bold_subtle": 0.2, "warm_cool": -0.6, "minimal_ornate": 0.6,
              "playful_serious": -0.7, "geometric_organic": 0.8, "luxury_accessible": 0.3},
        description="Structured design system with corporate precision",
        website="https://ibm.com",
        personality=["Corporate", "Structured", "Reliable", "Systematic"],
    ),
    Archetype(
        name="Figma",
        axes={"modern_classic": 0.8, "bold_subtle": 0.5, "warm_cool": 0.2, "minimal_ornate": 0.5,
              "playful_serious": 0.6, "geometric_organic": 0.4, "luxury_accessible": -0.3},
        description="Vibrant gradients with clean, collaborative energy",
        website="https://figma.com",
        personality=["Creative", "Collaborative", "Vibrant", "Modern"],
    ),
    Archetype(
        name="Patagonia",
        axes={"modern_classic": -0.1, "bold_subtle": 0.3, "warm_cool": 0.5, "minimal_ornate": 0.2,
              "playful_serious": -0.1, "geometric_organic": -0.7, "luxury_accessible": -0.3},
        description="Rugged outdoor authenticity with earthy tones",
        website="https://patagonia.com",
        personality=["Authentic", "Rugged", "Earthy", "Purpose-driven"],
    ),
    Archetype(
        name="Airbnb",
        axes={"modern_classic": 0.6, "bold_subtle": 0.3, "warm_cool": 0.8, "minimal_ornate": 0.3,
              "playful_serious": 0.4, "geometric_organic": -0.2, "luxury_accessible": -0.2},
        description="Warm coral tones with human-centered photography",
        website="https://airbnb.com",
        personality=["Welcoming", "Human", "Warm", "Adventurous"],
    ),
)


# Comparison pairs


def _pair(pair_id: str, category: str, question: str, option_a: dict, option_b: dict) -> ComparisonPair:
    a = PairOption(**{**option_a, "deltas": translate_legacy_vector(option_a["deltas"])})
    b = PairOption(**{**option_b, "deltas": translate_legacy_vector(option_b["deltas"])})
    target_dims = list(dict.fromkeys([*a.deltas, *b.deltas]))
    return ComparisonPair(id=pair_id, category=category, question=question, option_a=a, option_b=b,
                          target_dims=target_dims)


def _img(photo_id: str) -> str:
    return f"https://images.unsplash.com/photo-{photo_id}?w=400&h=300&fit=crop&q=80"


INITIAL_PAIRS: Final[tuple[ComparisonPair, ...]] = (
    _pair(
        "mood-1", "mood", "Which overall feel fits your brand?",
        {"label": "Clean & Minimal", "sublabel": "Lots of whitespace, simple forms",
         "image": _img("1494438639946-1ebd1d20bf85"),
         "deltas": {"minimal_ornate": 20, "modern_classic": 15, "light_heavy": 15}},
        {"label": "Rich & Layered", "sublabel": "Textures, depth, visual complexity",
         "image": _img("1557672172-298e090bd0f1"),
         "deltas": {"minimal_ornate": -20, "warm_cool": 10, "organic_geometric": -10}},
    ),
    _pair(
        "color-1", "color", "Which color energy feels right?",
        {"label": "Bold & Vibrant", "sublabel": "High contrast, energetic colors",
         "image": _img("1513364776144-60967b0f800f"),
         "deltas": {"bold_subtle": 20, "playful_serious": 15, "warm_cool": 10}},
        {"label": "Soft & Muted", "sublabel": "Gentle tones, understated elegance",
         "image": _img("1618005182384-a83a8bd57fbe"),
         "deltas": {"bold_subtle": -15, "playful_serious": -10, "warm_cool": -5}},
    ),
    _pair(
        "structure-1", "structure", "Which shapes feel more like you?",
        {"label": "Geometric & Precise", "sublabel": "Sharp lines, mathematical forms",
         "image": _img("1509537257950-20f875b03669"),
         "deltas": {"organic_geometric": 20, "modern_classic": 10, "bold_subtle": 10}},
        {"label": "Organic & Flowing", "sublabel": "Natural curves, hand-drawn feel",
         "image": _img("1518531933037-91b2f5f229cc"),
         "deltas": {"organic_geometric": -20, "warm_cool": 15, "playful_serious": 5}},
    ),
    _pair(
        "mood-2", "mood", "How should your brand talk to people?",
        {"label": "Serious & Professional", "sublabel": "Corporate, trustworthy, refined",
         "image": _img("1545239351-ef35f43d514b"),
         "deltas": {"playful_serious": -20, "modern_classic": -5, "bold_subtle": -10}},
        {"label": "Playful & Approachable", "sublabel": "Fun, friendly, conversational",
         "image": _img("1558618666-fcd25c85f82e"),
         "deltas": {"playful_serious": 20, "warm_cool": 10, "organic_geometric": -5}},
    ),
)

ADAPTIVE_PAIRS: Final[tuple[ComparisonPair, ...]] = (
    _pair(
        "minimal-depth-1", "minimal", "How minimal is minimal?",
        {"label": "Ultra Minimal", "sublabel": "Almost nothing, maximum whitespace",
         "image": _img("1586023492125-27b2c045efd7"),
         "deltas": {"minimal_ornate": 25, "light_heavy": 20, "modern_classic": 15}},
        {"label": "Minimal + Warmth", "sublabel": "Simple but inviting, subtle textures",
         "image": _img("1567538096630-e0c55bd6374c"),
         "deltas": {"minimal_ornate": 15, "warm_cool": 15, "light_heavy": 10}},
    ),
    _pair(
        "minimal-depth-2", "minimal", "Which kind of calm?",
        {"label": "Japanese Minimal", "sublabel": "Wabi-sabi, intentional imperfection, zen calm",
         "image": _img("1545083036-b175dd155a1d"),
         "deltas": {"minimal_ornate": 20, "organic_geometric": -10, "warm_cool": 5}},
        {"label": "Scandinavian Minimal", "sublabel": "Functional beauty, light wood, cozy simplicity",
         "image": _img("1600210492486-724fe5c67fb0"),
         "deltas": {"minimal_ornate": 18, "warm_cool": 12, "organic_geometric": -5}},
    ),
    _pair(
        "minimal-depth-3", "minimal", "Raw or systematic?",
        {"label": "Brutalist", "sublabel": "Raw, honest, deliberately unpolished",
         "image": _img("1520575733529-2b3b2f3fb4ff"),
         "deltas": {"minimal_ornate": 10, "bold_subtle": 15, "modern_classic": 20, "organic_geometric": 10}},
        {"label": "Swiss Design", "sublabel": "Grid-based perfection, typographic hierarchy",
         "image": _img("1558591710-4b4a1ae0f04d"),
         "deltas": {"minimal_ornate": 18, "organic_geometric": 22, "modern_classic": 12}},
    ),
    _pair(
        "bold-depth-1", "bold", "What kind of bold?",
        {"label": "Maximum Impact", "sublabel": "Loud, attention-grabbing, dramatic",
         "image": _img("1541746972996-4e0b0f93e586"),
         "deltas": {"bold_subtle": 25, "light_heavy": 15, "playful_serious": 10}},
        {"label": "Bold + Sophisticated", "sublabel": "Strong but refined, controlled power",
         "image": _img("1579952363873-27d3bfad9c0d"),
         "deltas": {"bold_subtle": 20, "playful_serious": -10, "modern_classic": 10}},
    ),
    _pair(
        "bold-depth-2", "bold", "Where does the drama come from?",
        {"label": "Neon & Electric", "sublabel": "Glowing accents, dark backgrounds, cyberpunk energy",
         "image": _img("1550684376-efcbd6e3f031"),
         "deltas": {"bold_subtle": 22, "modern_classic": 18, "warm_cool": -10}},
        {"label": "Editorial Bold", "sublabel": "Magazine-style drama, oversized type, intentional contrast",
         "image": _img("1524995997946-a1c2e315a42f"),
         "deltas": {"bold_subtle": 20, "modern_classic": -5, "light_heavy": -10}},
    ),
    _pair(
        "warm-depth-1", "warm", "Which warmth feels right?",
        {"label": "Cozy & Handcrafted", "sublabel": "Hand-drawn elements, natural textures, artisanal",
         "image": _img("1556909114-44e3e70034e2"),
         "deltas": {"warm_cool": 20, "organic_geometric": -15, "playful_serious": 10}},
        {"label": "Warm Luxury", "sublabel": "Rich materials, amber tones, inviting opulence",
         "image": _img("1600585154340-be6161a56a0c"),
         "deltas": {"warm_cool": 18, "light_heavy": -10, "playful_serious": -12, "luxury_accessible": 12}},
    ),
    _pair(
        "cool-depth-1", "cool", "Which cool feels right?",
        {"label": "Tech Cool", "sublabel": "Blue-steel, data-driven, precise interfaces",
         "image": _img("1550751827-4bd374c3f58b"),
         "deltas": {"warm_cool": -18, "modern_classic": 15, "organic_geometric": 12}},
        {"label": "Icy Elegance", "sublabel": "Cool grays, silver accents, quiet sophistication",
         "image": _img("1551244072-5d12893278ab"),
         "deltas": {"warm_cool": -20, "light_heavy": 10, "playful_serious": -12, "luxury_accessible": 8}},
    ),
    _pair(
        "type-depth-1", "type", "What leads the design?",
        {"label": "Type-Forward", "sublabel": "Typography IS the design, words are art",
         "image": _img("1455390582262-044cdead277a"),
         "deltas": {"bold_subtle": 15, "modern_classic": 10, "organic_geometric": 5}},
        {"label": "Image-Forward", "sublabel": "Photography-led, visuals tell the story",
         "image": _img("1506905925346-21bda4d32df4"),
         "deltas": {"bold_subtle": 10, "warm_cool": 8, "organic_geometric": -8}},
    ),
    _pair(
        "playful-depth-1", "playful", "Which kind of fun?",
        {"label": "Quirky & Illustrated", "sublabel": "Custom illustrations, character-driven, storybook feel",
         "image": _img("1618172193622-ae2d025f4032"),
         "deltas": {"playful_serious": 22, "organic_geometric": -12, "warm_cool": 10}},
        {"label": "Vibrant Modern", "sublabel": "Bright gradients, geometric play, tech-playful",
         "image": _img("1561070791-2526d30994b5"),
         "deltas": {"playful_serious": 18, "modern_classic": 15, "organic_geometric": 10}},
    ),
    _pair(
        "luxury-depth-1", "luxury", "Which kind of premium?",
        {"label": "Old Money", "sublabel": "Heritage, timelessness, understated wealth",
         "image": _img("1600596542815-ffad4c1539a9"),
         "deltas": {"modern_classic": -15, "luxury_accessible": 20, "playful_serious": -18}},
        {"label": "New Luxury", "sublabel": "Contemporary premium, clean lines, refined innovation",
         "image": _img("1618221195710-dd6b41faaea6"),
         "deltas": {"modern_classic": 18, "luxury_accessible": 12, "playful_serious": -8}},
    ),
    _pair(
        "texture-1", "texture", "Screen or paper?",
        {"label": "Flat & Digital", "sublabel": "Crisp vectors, solid colors, screen-native",
         "image": _img("1618172193763-c511deb635ca"),
         "deltas": {"modern_classic": 15, "organic_geometric": 12, "minimal_ornate": 8}},
        {"label": "Textured & Tactile", "sublabel": "Paper grain, emboss effects, physical feel",
         "image": _img("1558618666-fcd25c85f82e"),
         "deltas": {"modern_classic": -12, "organic_geometric": -10, "warm_cool": 8}},
    ),
    _pair(
        "density-1", "density", "How much on each screen?",
        {"label": "Breathing Room", "sublabel": "Generous margins, one idea per screen",
         "image": _img("1494438639946-1ebd1d20bf85"),
         "deltas": {"minimal_ornate": 18, "light_heavy": 15, "bold_subtle": -8}},
        {"label": "Content Rich", "sublabel": "Dense information, dashboards, data-forward",
         "image": _img("1504711434969-e33886168d5c"),
         "deltas": {"minimal_ornate": -15, "modern_classic": 8, "organic_geometric": 10}},
    ),
)

COMPARISON_PAIRS: Final[tuple[ComparisonPair, ...]] = INITIAL_PAIRS + ADAPTIVE_PAIRS


# Recommendation databases

FONTS: Final[tuple[FontProfile, ...]] = (
    FontProfile(name="Inter", category="sans-serif", google_fonts_family="Inter",
                axes={"modern_classic": 0.7, "minimal_ornate": 0.7, "geometric_organic": 0.5}),
    FontProfile(name="Space Grotesk", category="sans-serif", google_fonts_family="Space+Grotesk",
                axes={"modern_classic": 0.9, "geometric_organic": 0.8, "playful_serious": 0.1}),
    FontProfile(name="DM Sans", category="sans-serif", google_fonts_family="DM+Sans",
                axes={"modern_classic": 0.6, "minimal_ornate": 0.6, "geometric_organic": 0.4}),
    FontProfile(name="Outfit", category="sans-serif", google_fonts_family="Outfit",
                axes={"modern_classic": 0.8, "geometric_organic": 0.6, "playful_serious": 0.2}),
    FontProfile(name="Sora", category="sans-serif", google_fonts_family="Sora",
                axes={"modern_classic": 0.8, "bold_subtle": 0.3, "geometric_organic": 0.7}),
    FontProfile(name="Plus Jakarta Sans", category="sans-serif", google_fonts_family="Plus+Jakarta+Sans",
                axes={"modern_classic": 0.7, "warm_cool": 0.2, "geometric_organic": 0.3}),
    FontProfile(name="Playfair Display", category="serif", google_fonts_family="Playfair+Display",
                axes={"modern_classic": -0.4, "luxury_accessible": 0.7, "bold_subtle": 0.3}),
    FontProfile(name="Lora", category="serif", google_fonts_family="Lora",
                axes={"modern_classic": -0.2, "warm_cool": 0.4, "luxury_accessible": 0.3}),
    FontProfile(name="Fraunces", category="serif", google_fonts_family="Fraunces",
                axes={"modern_classic": -0.1, "playful_serious": 0.4, "geometric_organic": -0.3, "warm_cool": 0.3}),
    FontProfile(name="Cormorant Garamond", category="serif", google_fonts_family="Cormorant+Garamond",
                axes={"modern_classic": -0.6, "luxury_accessible": 0.8, "minimal_ornate": -0.2}),
    FontProfile(name="Source Serif 4", category="serif", google_fonts_family="Source+Serif+4",
                axes={"modern_classic": -0.1, "playful_serious": -0.3, "luxury_accessible": 0.2}),
    FontProfile(name="JetBrains Mono", category="monospace", google_fonts_family="JetBrains+Mono",
                axes={"modern_classic": 0.8, "geometric_organic": 0.9, "playful_serious": -0.2}),
    FontProfile(name="Space Mono", category="monospace", google_fonts_family="Space+Mono",
                axes={"modern_classic": 0.7, "geometric_organic": 0.7, "playful_serious": 0.1}),
    FontProfile(name="Caveat", category="handwriting", google_fonts_family="Caveat",
                axes={"modern_classic": -0.3, "playful_serious": 0.8, "geometric_organic": -0.8, "warm_cool": 0.5}),
    FontProfile(name="Archivo", category="sans-serif", google_fonts_family="Archivo",
                axes={"modern_classic": 0.6, "bold_subtle": 0.5, "geometric_organic": 0.5}),
    FontProfile(name="Bricolage Grotesque", category="sans-serif", google_fonts_family="Bricolage+Grotesque",
                axes={"modern_classic": 0.5, "playful_serious": 0.3, "geometric_organic": -0.2, "warm_cool": 0.2}),
    FontProfile(name="Instrument Serif", category="serif", google_fonts_family="Instrument+Serif",
                axes={"modern_classic": 0.2, "luxury_accessible": 0.5, "minimal_ornate": 0.3}),
    FontProfile(name="Bebas Neue", category="display", google_fonts_family="Bebas+Neue",
                axes={"bold_subtle": 0.9, "modern_classic": 0.4, "geometric_organic": 0.6}),
    FontProfile(name="Righteous", category="display", google_fonts_family="Righteous",
                axes={"bold_subtle": 0.6, "playful_serious": 0.5, "geometric_organic": 0.3}),
    FontProfile(name="Merriweather", category="serif", google_fonts_family="Merriweather",
                axes={"modern_classic": -0.3, "playful_serious": -0.2, "warm_cool": 0.2}),
)

PALETTES: Final[tuple[PaletteProfile, ...]] = (
    PaletteProfile(name="Midnight Tech", colors=["#0F172A", "#1E293B", "#3B82F6", "#60A5FA", "#F8FAFC"],
                   mood="Technical & Premium",
                   axes={"modern_classic": 0.8, "warm_cool": -0.6, "luxury_accessible": 0.5, "minimal_ornate": 0.6}),
    PaletteProfile(name="Warm Terracotta", colors=["#92400E", "#C2410C", "#F59E0B", "#FEF3C7", "#FFFBEB"],
                   mood="Earthy & Inviting",
                   axes={"warm_cool": 0.9, "modern_classic": -0.2, "geometric_organic": -0.4, "luxury_accessible": 0.1}),
    PaletteProfile(name="Sage & Stone", colors=["#1C1917", "#57534E", "#84CC16", "#A3E635", "#F5F5F4"],
                   mood="Natural & Calm",
                   axes={"warm_cool": 0.4, "minimal_ornate": 0.6, "geometric_organic": -0.5, "playful_serious": -0.2}),
    PaletteProfile(name="Electric Violet", colors=["#2E1065", "#7C3AED", "#A78BFA", "#C4B5FD", "#EDE9FE"],
                   mood="Creative & Bold",
                   axes={"bold_subtle": 0.7, "modern_classic": 0.6, "playful_serious": 0.3, "luxury_accessible": 0.3}),
    PaletteProfile(name="Coral Breeze", colors=["#FF6B6B", "#FFA07A", "#FFD4A8", "#FFF5EE", "#FFFFFF"],
                   mood="Warm & Friendly",
                   axes={"warm_cool": 0.8, "playful_serious": 0.5, "bold_subtle": 0.3, "luxury_accessible": -0.3}),
    PaletteProfile(name="Monochrome Pro", colors=["#09090B", "#27272A", "#52525B", "#A1A1AA", "#FAFAFA"],
                   mood="Serious & Professional",
                   axes={"minimal_ornate": 0.8, "playful_serious": -0.6, "modern_classic": 0.5, "luxury_accessible": 0.3}),
    PaletteProfile(name="Ocean Depth", colors=["#0C4A6E", "#0369A1", "#0EA5E9", "#7DD3FC", "#F0F9FF"],
                   mood="Trustworthy & Clean",
                   axes={"warm_cool": -0.5, "playful_serious": -0.3, "modern_classic": 0.3, "luxury_accessible": -0.1}),
    PaletteProfile(name="Forest Luxe", colors=["#14532D", "#166534", "#22C55E", "#BBF7D0", "#FEF9C3"],
                   mood="Natural & Premium",
                   axes={"warm_cool": 0.3, "geometric_organic": -0.6, "luxury_accessible": 0.4, "playful_serious": -0.1}),
    PaletteProfile(name="Blush & Navy", colors=["#1E3A5F", "#2563EB", "#F9A8D4", "#FDF2F8", "#FFFFFF"],
                   mood="Sophisticated & Fresh",
                   axes={"modern_classic": 0.4, "luxury_accessible": 0.4, "warm_cool": 0.2, "bold_subtle": 0.2}),
    PaletteProfile(name="Neon Minimal", colors=["#000000", "#1A1A1A", "#00FF87", "#ECFDF5", "#FFFFFF"],
                   mood="Edgy & Modern",
                   axes={"modern_classic": 0.9, "bold_subtle": 0.6, "minimal_ornate": 0.7, "playful_serious": 0.2}),
    PaletteProfile(name="Sunset Gradient", colors=["#FF6B35", "#F7C59F", "#EFEFD0", "#004E89", "#1A1A2E"],
                   mood="Energetic & Warm",
                   axes={"warm_cool": 0.7, "bold_subtle": 0.6, "playful_serious": 0.4, "luxury_accessible": -0.1}),
    PaletteProfile(name="Lavender Dream", colors=["#4C1D95", "#6D28D9", "#8B5CF6", "#DDD6FE", "#FAF5FF"],
                   mood="Soft & Creative",
                   axes={"playful_serious": 0.2, "warm_cool": 0.1, "bold_subtle": 0.1, "luxury_accessible": 0.2}),
    PaletteProfile(name="Gold Standard", colors=["#1C1917", "#44403C", "#CA8A04", "#FDE68A", "#FFFBEB"],
                   mood="Luxurious & Classic",
                   axes={"luxury_accessible": 0.9, "modern_classic": -0.4, "bold_subtle": 0.3, "playful_serious": -0.5}),
    PaletteProfile(name="Fresh Mint", colors=["#064E3B", "#059669", "#34D399", "#A7F3D0", "#ECFDF5"],
                   mood="Fresh & Approachable",
                   axes={"warm_cool": -0.1, "playful_serious": 0.3, "modern_classic": 0.3, "luxury_accessible": -0.3}),
)


# Answer tables used by the signal extractor

DESCRIPTION_KEYWORDS: Final[SignalTable] = {
    "luxury": {"luxury_accessible": 0.5},
    "premium": {"luxury_accessible": 0.4, "bold_subtle": 0.2},
    "affordable": {"luxury_accessible": -0.5},
    "fun": {"playful_serious": 0.5, "warm_cool": 0.2},
    "professional": {"playful_serious": -0.4, "minimal_ornate": 0.2},
    "innovative": {"modern_classic": 0.5, "geometric_organic": 0.2},
    "traditional": {"modern_classic": -0.5},
    "startup": {"modern_classic": 0.4, "minimal_ornate": 0.3},
    "enterprise": {"playful_serious": -0.4, "luxury_accessible": 0.2},
    "creative": {"playful_serious": 0.3, "bold_subtle": 0.3},
    "minimal": {"minimal_ornate": 0.5},
    "bold": {"bold_subtle": 0.5},
    "elegant": {"luxury_accessible": 0.4, "bold_subtle": -0.2},
    "friendly": {"playful_serious": 0.3, "warm_cool": 0.3},
    "modern": {"modern_classic": 0.4},
    "natural": {"geometric_organic": -0.4, "warm_cool": 0.3},
    "tech": {"modern_classic": 0.4, "geometric_organic": 0.3},
}

# Each entry fires once when any of its chips is selected
DELIVERABLE_SIGNALS: Final[tuple[tuple[str, tuple[str, ...], dict[str, float]], ...]] = (
    ("strategy", ("brand_strategy",), {"playful_serious": -0.2, "luxury_accessible": 0.2}),
    ("social", ("social_templates", "story_templates"), {"playful_serious": 0.2, "modern_classic": 0.2}),
    ("ecommerce", ("ecommerce",), {"modern_classic": 0.2, "bold_subtle": 0.1}),
)

STYLE_CARDS: Final[SignalTable] = {
    "minimalist": {"minimal_ornate": 0.7, "modern_classic": 0.3, "bold_subtle": -0.2},
    "bold": {"bold_subtle": 0.7, "minimal_ornate": -0.2},
    "playful": {"playful_serious": 0.7, "warm_cool": 0.3},
    "elegant": {"luxury_accessible": 0.6, "bold_subtle": -0.1, "playful_serious": -0.3},
    "vintage": {"modern_classic": -0.7, "warm_cool": 0.2},
    "modern": {"modern_classic": 0.7, "geometric_organic": 0.3},
    "organic": {"geometric_organic": -0.7, "warm_cool": 0.3},
    "geometric": {"geometric_organic": 0.7, "modern_classic": 0.3},
}

PALETTE_CHOICES: Final[SignalTable] = {
    "Ocean": {"warm_cool": -0.5, "modern_classic": 0.2, "playful_serious": -0.1},
    "Sunset": {"warm_cool": 0.7, "bold_subtle": 0.3, "playful_serious": 0.2},
    "Forest": {"warm_cool": 0.3, "geometric_organic": -0.5, "luxury_accessible": 0.1},
    "Midnight": {"warm_cool": -0.4, "bold_subtle": 0.4, "luxury_accessible": 0.3, "modern_classic": 0.3},
    "Coral": {"warm_cool": 0.6, "playful_serious": 0.3, "bold_subtle": 0.1},
    "Monochrome": {"minimal_ornate": 0.6, "playful_serious": -0.4, "modern_classic": 0.3},
    "Lavender": {"playful_serious": 0.2, "warm_cool": 0.1, "luxury_accessible": 0.2},
    "Earth": {"warm_cool": 0.5, "geometric_organic": -0.4, "modern_classic": -0.2},
}

FONT_STYLES: Final[SignalTable] = {
    "serif": {"modern_classic": -0.4, "luxury_accessible": 0.3},
    "sans-serif": {"modern_classic": 0.4, "minimal_ornate": 0.2},
    "display": {"bold_subtle": 0.5, "playful_serious": 0.2},
    "script": {"luxury_accessible": 0.3, "geometric_organic": -0.4, "warm_cool": 0.2},
    "monospace": {"modern_classic": 0.5, "geometric_organic": 0.6},
    "handwritten": {"playful_serious": 0.5, "geometric_organic": -0.5, "warm_cool": 0.3},
}

# "regular" is a known answer that carries no lean
FONT_WEIGHTS: Final[SignalTable] = {
    "light": {"bold_subtle": -0.4, "minimal_ornate": 0.3, "luxury_accessible": 0.2},
    "regular": {},
    "bold": {"bold_subtle": 0.4, "minimal_ornate": -0.1},
}

TYPE_COMPARISONS: Final[dict[str, dict[str, dict[str, float]]]] = {
    "serif-vs-sans": {
        "A": {"modern_classic": -0.4, "luxury_accessible": 0.2},
        "B": {"modern_classic": 0.4, "minimal_ornate": 0.2},
    },
    "tight-vs-loose": {
        "A": {"bold_subtle": 0.4, "minimal_ornate": -0.1},
        "B": {"bold_subtle": -0.3, "minimal_ornate": 0.4},
    },
}
