"""CSS selectors for fictionzone.net markup.

All structural coupling to the site's HTML lives here.
"""

from __future__ import annotations

# Library listing / search results
LIST_CARD = "div.novel-card"
LIST_LINK = "a[href]"
LIST_TITLE = "div.title > h1"
LIST_COVER = "div.novel-img > img"

# Novel detail page
NOVEL_TITLE = "div.novel-title > h1"
NOVEL_AUTHOR = "div.novel-author > content"
NOVEL_COVER = "div.novel-img > img"
NOVEL_GENRES = "div.genres > .items > span"
NOVEL_TAGS = "div.tags > .items > a"
NOVEL_SUMMARY = "#synopsis > div.content"
NOVEL_STATUS = "div.novel-status > div.content"
HYDRATION_PAYLOAD = "script#__NUXT_DATA__"
CHAPTER_LINKS = "div.chapters > div.list-wrapper > div.items > a.chapter"
CHAPTER_TITLE = "span.chapter-title"
CHAPTER_DATE = "span.update-date"
LAST_PAGE = "div.chapters ul.el-pager > li:last-child"

# Chapter page
CHAPTER_CONTENT = "div.chapter-content"

ONGOING_LABEL = "Ongoing"
