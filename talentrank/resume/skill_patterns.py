"""
Skill vocabulary tables.

All of the data the skill extractor matches against lives here as
plain literals so that each category can be tested and extended on
its own.  Term patterns are regular expression fragments; they are
joined per category and wrapped in word boundaries by
:func:`talentrank.resume.extract_skills.compile_patterns`.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

# Line-anchored headers that introduce a skills section.  A header must
# be followed by a colon or by the end of its line.
SECTION_HEADER_PATTERNS: Tuple[str, ...] = (
    r"(?:tech[ \t]+)?skills?",
    r"technical[ \t]+skills?",
    r"technologies?",
    r"programming[ \t]+languages?",
    r"tools?[ \t]+(?:and|&)[ \t]+technologies?",
    r"(?:core[ \t]+)?competenc(?:y|ies)",
    r"(?:areas?[ \t]+of[ \t]+)?expertise",
)

# The next all-caps header ("EXPERIENCE:", "WORK HISTORY:") closes a section.
SECTION_END_PATTERN = r"^[ \t]*[A-Z][A-Z \t]{2,}[A-Z][ \t]*:"

# Lines mentioning one of these keywords anchor the fallback window.
WINDOW_KEYWORDS: Tuple[str, ...] = (
    "java", "python", "javascript", "typescript", "react", "node", "sql",
    "postgresql", "mongodb", "docker", "kubernetes", "aws", "azure", "git",
    "selenium", "playwright", "jest", "maven", "gradle",
)
WINDOW_LINES_BEFORE = 2
WINDOW_LINES_AFTER = 5

SKILL_PATTERNS: Dict[str, List[str]] = {
    "languages": [
        "java", "python", "javascript", "typescript", "go", "rust", r"c\+\+",
        "c#", "php", "ruby", "swift", "kotlin", "scala", "r", "matlab", "perl",
        "bash", "shell", "powershell",
    ],
    "frameworks": [
        "react", "vue", "angular", "svelte", r"next\.js", "nuxt", "express",
        "nest", "fastapi", "django", "flask", "spring", "hibernate", "laravel",
        "symfony", "rails", r"asp\.net",
    ],
    "databases": [
        "postgresql", "mysql", "mongodb", "redis", "cassandra", "elasticsearch",
        "dynamodb", "oracle", r"sql\s+server", "sqlite", "neo4j",
    ],
    "cloud_devops": [
        "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "gitlab",
        "github", "ci/cd", "terraform", "ansible", "chef", "puppet",
    ],
    "testing": [
        "selenium", "playwright", "cypress", "jest", "mocha", "junit", "testng",
        "pytest", "rspec", "allure", "postman", "soapui",
    ],
    "build_tools": [
        "maven", "gradle", "npm", "yarn", "webpack", "vite", "gulp", "grunt",
    ],
    "version_control": [
        "git", "svn", "mercurial", "perforce",
    ],
    "protocols": [
        "rest", "graphql", "grpc", "microservices", "api", "http", "https",
        "tcp", "udp", "websocket",
    ],
    "operating_systems": [
        "linux", "unix", "windows", "macos", "ios", "android",
    ],
    "frontend": [
        "html", "css", "sass", "less", "bootstrap", "tailwind", "material-ui",
    ],
}

# Single words accepted verbatim from the skills section.
TECH_KEYWORDS = frozenset({
    "java", "python", "javascript", "typescript", "react", "node", "sql", "git",
    "docker", "kubernetes", "aws", "azure", "selenium", "playwright", "jest",
    "maven", "gradle", "npm", "yarn", "postgresql", "mongodb", "redis",
    "express", "django", "flask", "spring", "laravel", "rails", "vue", "angular",
})

# Broad vocabulary scanned over the whole text when nothing else matched.
FALLBACK_TERMS: Tuple[str, ...] = (
    "java", "python", "javascript", "typescript", "react", "vue", "angular", "node",
    "express", "django", "flask", "spring", "laravel", "rails", "kotlin", "swift",
    "postgresql", "mysql", "mongodb", "redis", "sql", "nosql",
    "docker", "kubernetes", "aws", "azure", "gcp", "jenkins", "gitlab", "github",
    "selenium", "playwright", "cypress", "jest", "mocha", "junit", "testng", "pytest",
    "maven", "gradle", "npm", "yarn", "webpack", "vite",
    "git", "html", "css", "sass", "less", "bootstrap", "tailwind",
    "rest", "graphql", "grpc", "api", "http", "https",
    "linux", "unix", "windows", "macos", "ios", "android",
    "allure", "postman", "soapui", "charles", "testflight",
)
