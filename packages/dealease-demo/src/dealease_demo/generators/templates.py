"""Static copy used to dress synthetic marketplace records.

Names, emails and company names come from Faker; everything domain
specific (industries, message bodies, document names) comes from here.
"""

from __future__ import annotations

INDUSTRIES: tuple[str, ...] = (
    "Technology",
    "SaaS",
    "E-commerce",
    "Healthcare",
    "Manufacturing",
    "Professional Services",
    "Food & Beverage",
    "Logistics",
    "Education",
    "Home Services",
)

BUSINESS_TYPES: dict[str, tuple[str, ...]] = {
    "Technology": ("Software", "IT Services", "Managed Services"),
    "SaaS": ("B2B SaaS", "Vertical SaaS", "Developer Tools"),
    "E-commerce": ("Online Store", "Subscription Box", "Marketplace"),
    "Healthcare": ("Clinic", "Home Health", "Medical Billing"),
    "Manufacturing": ("Contract Manufacturing", "Machine Shop", "Packaging"),
    "Professional Services": ("Accounting Firm", "Marketing Agency", "Consultancy"),
    "Food & Beverage": ("Restaurant", "Bakery", "Specialty Foods"),
    "Logistics": ("Freight Brokerage", "Courier", "Warehousing"),
    "Education": ("Tutoring", "Online Courses", "Training Center"),
    "Home Services": ("HVAC", "Landscaping", "Plumbing"),
}

EXPERIENCE_LEVELS: tuple[str, ...] = (
    "first-time",
    "some-experience",
    "experienced",
    "serial-acquirer",
)

BUYER_TITLES: tuple[str, ...] = (
    "Managing Partner",
    "Principal",
    "Independent Sponsor",
    "Search Fund Operator",
    "Director of Corporate Development",
)

SELLER_TITLES: tuple[str, ...] = ("Founder & CEO", "Owner", "President", "Co-Founder")

TIMELINES: tuple[str, ...] = ("0-3 months", "3-6 months", "6-9 months", "6-12 months", "12+ months")

DEAL_STRUCTURES: tuple[str, ...] = (
    "Asset purchase",
    "Stock purchase",
    "Asset purchase with seller note",
    "Earn-out",
    "SBA 7(a) financed",
)

REASONS_FOR_SELLING: tuple[str, ...] = (
    "Ready for retirement",
    "Want to focus on new ventures",
    "Relocating",
    "Partner buyout",
    "Health reasons",
    "Need capital to scale beyond current team",
)

MATCH_REASONS: tuple[str, ...] = (
    "Industry preference match",
    "Within investment range",
    "Location preference match",
    "Compatible timeline",
    "Open to seller financing",
    "Operator experience in the sector",
)

MESSAGE_BODIES: tuple[str, ...] = (
    "Thanks for the additional information. I'll review and get back to you shortly.",
    "The numbers look great. When would be a good time for a call?",
    "I've shared this with my team. They're impressed with the growth metrics.",
    "Can you provide more details about the customer concentration?",
    "The due diligence is progressing well. No major concerns so far.",
    "I've uploaded the latest P&L to the data room.",
    "Would you be open to a transition period of six months?",
    "Our lender has asked for the last three years of tax returns.",
    "Happy to walk you through the operations next week.",
    "We're aligned on valuation. Let's talk about the structure.",
)

NOTIFICATION_COPY: dict[str, tuple[str, str]] = {
    "match-created": ("New match", "You have a new match waiting for review."),
    "new-message": ("New message", "You received a new message in one of your conversations."),
    "meeting-request": ("Meeting request", "A counterpart has requested a meeting."),
    "deal-update": ("Deal update", "A deal you follow moved to a new stage."),
    "system": ("Weekly Market Update", "New opportunities matching your criteria are available."),
}

DOCUMENT_NAMES: dict[str, tuple[str, ...]] = {
    "financial": (
        "Financial_Statements_2021-2023.pdf",
        "Monthly_PnL_2023.xlsx",
        "Tax_Returns_2020-2022.pdf",
        "Quality_of_Earnings_Report.pdf",
    ),
    "legal": (
        "Mutual_NDA.pdf",
        "Letter_of_Intent_Draft.docx",
        "Customer_Contracts_Summary.pdf",
    ),
    "operational": (
        "Customer_Analysis_Q4_2023.xlsx",
        "Employee_Handbook_2024.pdf",
        "Vendor_List.xlsx",
    ),
    "technical": (
        "Software_Architecture_Overview.pdf",
        "Infrastructure_Costs.xlsx",
    ),
    "other": ("Company_Overview_Deck.pdf", "Site_Photos.zip"),
}

MIME_TYPES: dict[str, str] = {
    "pdf": "application/pdf",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "zip": "application/zip",
}

ANALYSIS_HIGHLIGHTS: tuple[str, ...] = (
    "Revenue grew consistently over the last three years",
    "Gross margin above industry median",
    "Low customer churn relative to peers",
    "Recurring revenue share above 60%",
    "Working capital requirements are modest",
    "Owner compensation normalized in adjusted EBITDA",
)

ANALYSIS_RISKS: tuple[tuple[str, str], ...] = (
    ("customer", "Top customer concentration above 20%"),
    ("operational", "Key person dependency on the founder"),
    ("financial", "Seasonal cash flow dip in Q1"),
    ("technology", "Legacy components in the core platform"),
    ("regulatory", "Pending license renewal"),
    ("market", "Increasing competition in the primary region"),
)

MODEL_VERSION = "dealease-analyst-v2"
