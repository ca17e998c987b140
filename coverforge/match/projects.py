from dataclasses import dataclass
from typing import Dict, List, Tuple

@dataclass(frozen=True)
class ProjectRecord:
    name: str
    description: str
    tech: str
    keywords: Tuple[str, ...]

    def summary(self) -> str:
        return f"{self.name} – {self.description}"

# Category -> portfolio projects, scored against job text by keyword substring
PROJECTS: Dict[str, List[ProjectRecord]] = {
    "ai": [
        ProjectRecord(
            "Hire Sync AI",
            "AI-powered job board with intelligent job matching and resume analysis",
            "Next.js, PostgreSQL, Anthropic Claude, Google Gemini, TypeScript",
            ("ai", "machine learning", "job matching", "resume analysis", "next.js", "postgresql"),
        ),
        ProjectRecord(
            "DashGen",
            "AI-powered dashboard generator with smart data visualization",
            "Next.js, TypeScript, Llama 3.1 405B, Recharts, PostgreSQL",
            ("ai", "dashboard", "data visualization", "llama", "analytics", "charts"),
        ),
        ProjectRecord(
            "Arabic Text Extraction",
            "OCR tool with GPT-4o Vision for Arabic text recognition",
            "Next.js, OpenAI GPT-4o Vision, Tesseract.js, TypeScript",
            ("ocr", "gpt-4", "text extraction", "arabic", "computer vision", "ai"),
        ),
        ProjectRecord(
            "ChatGennie AI",
            "AI chatbot mobile application",
            "Flutter, AI Integration",
            ("flutter", "mobile", "chatbot", "ai", "mobile development"),
        ),
    ],
    "fullstack": [
        ProjectRecord(
            "Vibes",
            "Real-time MERN chat application with WebSocket communication",
            "MongoDB, Express, React, Node.js, Socket.io, Redux Toolkit",
            ("mern", "real-time", "chat", "websocket", "socket.io", "react", "mongodb"),
        ),
        ProjectRecord(
            "NextJ-SaaS-ShipFast",
            "Production-ready SaaS boilerplate with billing and authentication",
            "Next.js 14, Convex, Clerk, Stripe, TypeScript, Tailwind CSS",
            ("saas", "boilerplate", "stripe", "authentication", "billing", "next.js"),
        ),
        ProjectRecord(
            "Ledgerly",
            "Personal finance management with transaction tracking",
            "Next.js 14, TypeScript, Supabase, Redux Toolkit, Tailwind CSS",
            ("finance", "tracking", "supabase", "redux", "personal finance", "transactions"),
        ),
        ProjectRecord(
            "Nexlify",
            "Modern web development project",
            "Next.js, TypeScript, Modern Web Technologies",
            ("next.js", "typescript", "web development", "modern"),
        ),
    ],
    "blockchain": [
        ProjectRecord(
            "Supply Chain DAPP",
            "Blockchain supply chain management with IoT integration",
            "Ethereum, Solidity, React, FastAPI, Arduino, DHT11 sensors",
            ("blockchain", "ethereum", "solidity", "supply chain", "iot", "dapp", "smart contracts"),
        ),
        ProjectRecord(
            "Web3 Chat Application",
            "Decentralized chat platform on blockchain",
            "Next.js, Web3, Tailwind CSS",
            ("web3", "blockchain", "decentralized", "chat", "next.js"),
        ),
    ],
    "automation": [
        ProjectRecord(
            "TextExtraction-GoogleSheets",
            "Automated text extraction to Google Sheets integration",
            "Python, Google Sheets API, Text Processing",
            ("automation", "google sheets", "text extraction", "python", "api integration"),
        ),
        ProjectRecord(
            "Python Email Scraper",
            "Email data extraction and processing tool",
            "Python, Web Scraping, Data Processing",
            ("python", "scraping", "email", "data processing", "automation"),
        ),
        ProjectRecord(
            "X Finder",
            "Search and discovery tool",
            "Web Technologies, Search Algorithms",
            ("search", "discovery", "algorithms", "web"),
        ),
    ],
    "enterprise": [
        ProjectRecord(
            "Crime Management System",
            "Law enforcement management system",
            "Database Management, System Architecture",
            ("management system", "database", "enterprise", "system design"),
        ),
        ProjectRecord(
            "Next WordPress Blog",
            "Modern blogging platform with WordPress backend",
            "Next.js, WordPress, Content Management",
            ("wordpress", "blog", "cms", "content management", "next.js"),
        ),
    ],
}

CATALOG: Tuple[ProjectRecord, ...] = tuple(p for group in PROJECTS.values() for p in group)

# Shown when nothing in the job text matches any project
FALLBACK_PROJECTS: Tuple[str, ...] = (
    "Hire Sync AI – AI-powered job board with intelligent matching",
    "DashGen – AI-powered dashboard generator",
    "Vibes – Real-time MERN chat application",
    "Ledgerly – Personal finance management platform",
)
