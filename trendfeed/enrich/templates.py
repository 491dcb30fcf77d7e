"""HTML bodies for enriched articles: editorial wrapper, provider and topic pages."""

from __future__ import annotations

import html
from datetime import datetime
from typing import Any

FIRE = "\U0001f525"
STAR = "⭐"
FORK = "\U0001f374"

TOPIC_SECTIONS = [
    "Current Industry Landscape",
    "Key Trends and Developments",
    "Professional Applications",
    "Expert Insights and Recommendations",
    "Future Outlook",
    "Actionable Steps for Professionals",
]


def _e(text: Any) -> str:
    """Escape text for safe HTML output."""
    return html.escape(str(text), quote=True)


def _list(items: list[str], ordered: bool = False) -> str:
    tag = "ol" if ordered else "ul"
    rows = "\n".join(f"  <li>{item}</li>" for item in items)
    return f"<{tag}>\n{rows}\n</{tag}>"


def _date(now: datetime) -> str:
    return now.strftime("%Y-%m-%d")


def wrap_editorial(body: str, source: str, brand: str, now: datetime) -> str:
    """Frame a provider body with the trending header and expert analysis block."""
    takeaways = _list([
        "Stay current with industry trends and best practices",
        "Apply these insights to your personal branding strategy",
        "Update your portfolio and resume with trending elements",
        "Network with professionals discussing these topics",
    ])
    actions = _list([
        "Assess how this trend affects your industry",
        "Update your professional materials accordingly",
        "Share insights with your network",
        "Monitor related developments",
    ], ordered=True)
    brand = _e(brand)

    return f"""<div class="content-header">
<div class="trending-badge">{FIRE} Trending on {_e(source)}</div>
<div class="last-updated">Updated: {_date(now)}</div>
</div>

{body}

<div class="editorial-insights">
<h3>{brand} Expert Analysis</h3>
<p>Our team has analyzed this trending content and here's how it applies to your professional development:</p>
<div class="actionable-insights">
<h4>Key Takeaways:</h4>
{takeaways}
</div>
<div class="next-steps">
<h4>Action Items:</h4>
{actions}
</div>
</div>

<div class="related-content">
<p><strong>Need help implementing these trends?</strong> {brand} offers professional templates and tools that incorporate the latest industry developments.</p>
</div>
"""


def render_hackernews_body(title: str, extra: dict[str, Any], text: str) -> str:
    """Discussion summary for a Hacker News story."""
    score = extra.get("score") or 0
    comments = extra.get("descendants") or 0
    original = f'<div class="original-content">{text}</div>\n' if text else ""
    seekers = _list([
        "Stay informed about industry technological shifts",
        "Adapt your skill set to emerging trends",
        "Update your resume with relevant trending keywords",
        "Engage with industry discussions and thought leaders",
    ])
    practitioners = _list([
        "Incorporate trending technologies into your work",
        "Update your portfolio with cutting-edge examples",
        "Participate in professional communities",
        "Share your expertise on trending topics",
    ])

    return f"""<h1>{_e(title)}</h1>
<div class="story-meta">
<p><strong>Trending Discussion</strong> | {score} points | {comments} comments</p>
<p>This topic is currently generating significant discussion in the tech community.</p>
</div>
{original}
<h2>Professional Implications</h2>
<p>This trending topic has important implications for career development and professional growth in today's market.</p>
<h3>For Job Seekers</h3>
{seekers}
<h3>For Design and Tech Professionals</h3>
{practitioners}
<h2>Industry Context</h2>
<p>Understanding and engaging with trending topics in the tech community is crucial for professional development. This discussion reflects current market priorities and future directions.</p>
"""


def render_github_body(name: str, description: str, extra: dict[str, Any]) -> str:
    """Project spotlight for a GitHub repository."""
    about = description or (
        "This trending open source project offers valuable resources "
        "for professional development."
    )
    learning = _list([
        "Study modern development practices and patterns",
        "Learn from community contributions and discussions",
        "Understand industry-standard tooling and workflows",
        "Discover new technologies and frameworks",
    ])
    benefits = _list([
        "Showcase your involvement in trending projects",
        "Build your GitHub profile and contribution history",
        "Network with other professionals in the community",
        "Stay current with industry developments",
    ])
    actions = _list([
        "Star the repository to show support",
        "Explore the codebase and documentation",
        "Consider contributing bug fixes or improvements",
        "Share the project with your professional network",
    ])

    return f"""<h1>Open Source Spotlight: {_e(name)}</h1>
<div class="repo-stats">
<p><strong>GitHub Project</strong> | {STAR} {extra.get("stars") or 0} stars | {FORK} {extra.get("forks") or 0} forks</p>
<p><strong>Language:</strong> {_e(extra.get("language") or "Multiple")} | <strong>License:</strong> {_e(extra.get("license") or "Not specified")}</p>
</div>
<div class="project-description">
<h2>About This Project</h2>
<p>{_e(about)}</p>
</div>
<h2>Why This Matters for Your Career</h2>
<p>Open source projects like this one represent current industry trends and best practices. Understanding and contributing to such projects can significantly boost your professional profile.</p>
<h3>Learning Opportunities</h3>
{learning}
<h3>Professional Benefits</h3>
{benefits}
<h2>How to Get Involved</h2>
<p>Consider exploring this project, contributing improvements, or using it as inspiration for your own work.</p>
<div class="call-to-action">
<h3>Take Action</h3>
{actions}
</div>
"""


def _section_content(topic: str, section: str) -> str:
    t = _e(topic.lower())
    templates = {
        "Current Industry Landscape": (
            f"<p>The professional landscape around {t} is rapidly evolving. "
            "Current market analysis reveals significant shifts in how "
            "organizations and individuals approach this area, with new "
            "technologies and methodologies reshaping traditional "
            "practices.</p>"
        ),
        "Key Trends and Developments": (
            f"<p>Recent developments in {t} include:</p>\n" + _list([
                "Integration of AI and automation technologies",
                "Emphasis on remote-first and hybrid approaches",
                "Focus on user experience and accessibility",
                "Data-driven decision making and analytics",
                "Sustainable and ethical practices",
            ])
        ),
        "Professional Applications": (
            f"<p>Professionals can apply {t} insights through:</p>\n" + _list([
                "Strategic planning and goal setting",
                "Skill development and continuous learning",
                "Portfolio and resume enhancement",
                "Networking and community engagement",
                "Personal branding and online presence",
            ], ordered=True)
        ),
        "Expert Insights and Recommendations": (
            f"<p>Industry experts recommend the following approaches for {t}:</p>\n"
            + _list([
                "Stay informed about emerging technologies and trends",
                "Invest in continuous professional development",
                "Build diverse, cross-functional skill sets",
                "Maintain active professional networks",
                "Focus on value creation and problem-solving",
            ])
        ),
        "Future Outlook": (
            f"<p>Looking ahead, {t} will likely be influenced by:</p>\n" + _list([
                "Continued technological advancement and adoption",
                "Changing workplace dynamics and expectations",
                "Global market shifts and economic factors",
                "Environmental and social responsibility considerations",
                "Generational differences in work preferences",
            ])
        ),
        "Actionable Steps for Professionals": (
            f"<p>Take concrete action on {t} with these steps:</p>\n" + _list([
                "Conduct a skills gap analysis and identify areas for improvement",
                "Create a professional development plan with specific goals",
                "Update your resume, portfolio, and online profiles",
                "Engage with industry communities and thought leaders",
                "Monitor trends and adapt your strategy accordingly",
            ], ordered=True)
        ),
    }
    return templates.get(section) or (
        f"<p>Comprehensive analysis of {_e(section.lower())} "
        f"as it relates to {t}.</p>"
    )


def render_topic_content(
    topic: str,
    brand: str,
    now: datetime,
    sections: list[str] | None = None,
) -> str:
    """Long-form article for a synthesized topic, one block per section."""
    parts = [
        f"<h1>{_e(topic)}</h1>",
        f'<div class="trend-indicator">{FIRE} <strong>Trending Topic</strong>'
        f" - Published {_date(now)}</div>",
    ]
    for section in sections or TOPIC_SECTIONS:
        parts.append(f"<h2>{_e(section)}</h2>\n{_section_content(topic, section)}")

    parts.append(
        '<div class="editorial-cta">\n'
        "<h3>Ready to Implement These Trends?</h3>\n"
        f"<p>{_e(brand)} helps professionals stay ahead of industry trends "
        "with cutting-edge templates, tools, and resources. Our platform "
        "incorporates the latest best practices to ensure your career "
        "materials are always competitive and current.</p>\n"
        "</div>"
    )
    return "\n\n".join(parts) + "\n"
