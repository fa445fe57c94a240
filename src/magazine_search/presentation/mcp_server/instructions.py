"""
MCP Server Instructions - Agent usage guide

Kept apart from server.py so the guide can be maintained on its own.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
Magazine Search MCP Server - search assistant for the Unic magazine

═══════════════════════════════════════════════════════════════════════════════
🎯 Choosing a tool
═══════════════════════════════════════════════════════════════════════════════

## 1️⃣ Topic questions ("anything about AI?", "articles on commerce")
───────────────────────────────────────────────────────────────────────────────
search_articles(query="AI", limit=5)
    Matches title, summary and author name. Results keep magazine order.

## 2️⃣ Time questions ("what was published in 2024?", "latest posts")
───────────────────────────────────────────────────────────────────────────────
filter_articles_by_date(startDate="2024-01-01", endDate="2024-12-31")
list_recent_articles(limit=5)
    Dates are ISO (YYYY-MM-DD). Results are newest first.

## 3️⃣ Author questions ("what did Jane write?")
───────────────────────────────────────────────────────────────────────────────
filter_articles_by_author(authorName="Jane")
    Partial, case-insensitive names are fine.

## 4️⃣ One specific article ("summarize the article about X")
───────────────────────────────────────────────────────────────────────────────
get_article_preview(title="Value-added AI solutions")
    If the title is unknown, run search_articles first.

═══════════════════════════════════════════════════════════════════════════════
📦 Resources
═══════════════════════════════════════════════════════════════════════════════

- blog://article/{slug}: one article as JSON (slugs come from search results)
- ui://widget/article-list.html, ui://widget/article-preview.html: widget markup

═══════════════════════════════════════════════════════════════════════════════
⚠️ Widgets
═══════════════════════════════════════════════════════════════════════════════

When a tool result is rendered as a widget, the widget already shows titles,
dates, authors and summaries. Do NOT repeat that content in your answer.
Limits default to 10 and are capped at 100.
"""

__all__ = ["SERVER_INSTRUCTIONS"]
