"""
Marketing copy for the landing page.

The front-end renders the hero, sections and footer from this payload.
"""

from typing import Any, Dict

HERO = {
    "badge": "AI-powered UI/UX Builder",
    "title": "Framebase, the foundation of every interface.",
    "subtitle": "Describe your screen. Generate structured, editable layouts for web and mobile.",
}

CTA = {
    "title": "Start designing smarter today.",
    "subtitle": "Join founders and designers shipping polished UI in a fraction of the time.",
    "button": "Get Started",
    "auth_prompt": "Create an account to continue.",
}

NAV_LINKS = [
    {"label": "How it works", "href": "#how-it-works"},
    {"label": "Pricing", "href": "#pricing"},
    {"label": "FAQs", "href": "#faqs"},
]

HOW_IT_WORKS_STEPS = [
    {
        "title": "Choose Platform",
        "description": "Web or Mobile. AI sticks to your choice.",
    },
    {
        "title": "Generate Screens",
        "description": "Layouts, sections, flows - instantly.",
    },
    {
        "title": "Edit & Export",
        "description": "Tweak inside the editor. Copy to Figma.",
    },
]

FEATURES = [
    {
        "title": "Web or Mobile Lock",
        "description": "Keep layout rules consistent across each platform.",
    },
    {
        "title": "Prompt-based generation",
        "description": "Describe your product and get clean UI instantly.",
    },
    {
        "title": "Live editor canvas",
        "description": "Adjust spacing, components, and hierarchy in real time.",
    },
    {
        "title": "Export-ready UI",
        "description": "Move designs to your handoff flow without friction.",
    },
]

BENEFITS = [
    {
        "title": "For Founders",
        "items": [
            "Validate product ideas before writing code",
            "Align teams with visual direction early",
            "Move faster with reusable UX patterns",
        ],
    },
    {
        "title": "For Designers",
        "items": [
            "Skip blank-canvas anxiety",
            "Build from production-ready layouts",
            "Deliver polished screens in fewer iterations",
        ],
    },
]

PRICING_PLANS = [
    {
        "name": "Starter",
        "price": "$19/mo",
        "description": "For early validation",
        "cta": "Start Small",
        "features": [
            "Web or Mobile projects",
            "Basic prompt generation",
            "Export-ready screens",
            "Email support",
        ],
        "highlight": False,
    },
    {
        "name": "Pro",
        "price": "$49/mo",
        "description": "Web + Mobile",
        "cta": "Build Faster",
        "badge": "Most Popular",
        "features": [
            "Unlimited projects",
            "Priority generation queue",
            "Advanced editing controls",
            "Team sharing",
        ],
        "highlight": True,
    },
]

FAQS = [
    {
        "question": "Is this for web or mobile?",
        "answer": "Both. Choose a platform and the builder adapts layouts to match it.",
    },
    {
        "question": "Can I edit designs?",
        "answer": "Yes. Tweak spacing, typography, and components in the editor.",
    },
    {
        "question": "Is this beginner friendly?",
        "answer": "Absolutely. No design background is required to get started.",
    },
    {
        "question": "Can I export to Figma?",
        "answer": "Export-ready layouts are built to fit your handoff workflow.",
    },
]

FOOTER = {
    "brand": "Framebase",
    "links": [
        {"label": "Pricing", "href": "#pricing"},
        {"label": "Privacy", "href": "#"},
        {"label": "Contact", "href": "mailto:contact@uibuilder.ai"},
    ],
}

# Shown by the client when rendering fails
ERROR_FALLBACK_MESSAGE = "Something went wrong. Please refresh and try again."


def get_site_content() -> Dict[str, Any]:
    """Everything the landing page needs in one payload."""
    return {
        "hero": HERO,
        "navLinks": NAV_LINKS,
        "howItWorks": HOW_IT_WORKS_STEPS,
        "features": FEATURES,
        "benefits": BENEFITS,
        "pricing": PRICING_PLANS,
        "faqs": FAQS,
        "cta": CTA,
        "footer": FOOTER,
        "errorFallback": ERROR_FALLBACK_MESSAGE,
    }
