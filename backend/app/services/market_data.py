# services/market_data.py
"""Static market trend, news and salary tables.

These stand in for labour-statistics and news feeds. The frontend caches the
trend entry it shows through the backend ``/cache/{field}`` endpoints.
"""
import copy
from datetime import datetime, timezone
from typing import Any, Dict, List

DEFAULT_FIELD = "technology"

MARKET_TRENDS: Dict[str, Dict[str, Any]] = {
    "technology": {
        "field": "Technology & AI",
        "growth": 25,
        "demand": "High",
        "avg_salary": "$95,000 - $180,000",
        "job_openings": 145000,
        "future_outlook": "Exponential growth expected with AI integration across all industries",
        "key_skills": ["Machine Learning", "Cloud Computing", "Cybersecurity", "Data Analysis"],
        "emerging_roles": ["AI Ethics Specialist", "Prompt Engineer", "Quantum Computing Developer"],
        "automation": 15,
        "source": "Bureau of Labor Statistics",
    },
    "healthcare": {
        "field": "Healthcare & Biotechnology",
        "growth": 18,
        "demand": "High",
        "avg_salary": "$85,000 - $160,000",
        "job_openings": 89000,
        "future_outlook": "Steady growth driven by aging population and medical advances",
        "key_skills": ["Genomics", "Telemedicine", "Health Informatics", "Personalized Medicine"],
        "emerging_roles": ["Genetic Counselor", "Health Data Analyst", "Telemedicine Specialist"],
        "automation": 25,
        "source": "Bureau of Labor Statistics",
    },
    "sustainability": {
        "field": "Sustainability & Green Energy",
        "growth": 22,
        "demand": "Emerging",
        "avg_salary": "$75,000 - $140,000",
        "job_openings": 67000,
        "future_outlook": "Rapid expansion as climate action becomes priority",
        "key_skills": ["Renewable Energy", "Environmental Science", "Sustainability Strategy", "Carbon Management"],
        "emerging_roles": ["Carbon Credit Analyst", "Sustainability Consultant", "Green Finance Specialist"],
        "automation": 20,
        "source": "Bureau of Labor Statistics",
    },
    "creative": {
        "field": "Creative & Digital Media",
        "growth": 12,
        "demand": "Medium",
        "avg_salary": "$65,000 - $120,000",
        "job_openings": 52000,
        "future_outlook": "Steady growth with digital transformation and content demand",
        "key_skills": ["Digital Marketing", "Content Creation", "UX/UI Design", "Brand Strategy"],
        "emerging_roles": ["Metaverse Designer", "Creator Economy Manager", "Digital Experience Architect"],
        "automation": 35,
        "source": "Bureau of Labor Statistics",
    },
    "business": {
        "field": "Business & Entrepreneurship",
        "growth": 15,
        "demand": "High",
        "avg_salary": "$80,000 - $150,000",
        "job_openings": 98000,
        "future_outlook": "Continuous demand with emphasis on digital transformation",
        "key_skills": ["Data Analytics", "Digital Marketing", "Project Management", "Strategic Planning"],
        "emerging_roles": ["Growth Hacker", "Business Intelligence Analyst", "Digital Transformation Manager"],
        "automation": 30,
        "source": "Bureau of Labor Statistics",
    },
}

TREND_KEYS = frozenset(MARKET_TRENDS[DEFAULT_FIELD])

# Interest option -> market trend field key
INTEREST_FIELDS = {
    "Technology & Programming": "technology",
    "Engineering": "technology",
    "Science & Research": "healthcare",
    "Healthcare & Medicine": "healthcare",
    "Environmental Science": "sustainability",
    "Arts & Design": "creative",
    "Music & Entertainment": "creative",
    "Business & Entrepreneurship": "business",
}


def get_market_trend(field: str) -> Dict[str, Any]:
    """Trend entry for a field key; unknown keys get the technology entry."""
    return copy.deepcopy(MARKET_TRENDS.get(field, MARKET_TRENDS[DEFAULT_FIELD]))


def is_complete_trend(value: Any) -> bool:
    """True when value is a dict carrying every key of a trend table entry."""
    return isinstance(value, dict) and TREND_KEYS.issubset(value)


def relevant_fields(interests: List[str]) -> List[str]:
    """Trend field keys matching the interests, in first-seen order."""
    fields = []
    for interest in interests:
        field = INTEREST_FIELDS.get(interest)
        if field and field not in fields:
            fields.append(field)
    return fields or [DEFAULT_FIELD]


def automation_risk(risk: int) -> str:
    if risk < 30:
        return "Low Risk"
    if risk < 60:
        return "Medium Risk"
    return "High Risk"


def get_emerging_fields() -> List[Dict[str, Any]]:
    return [
        {
            "name": "Quantum Computing",
            "description": "Revolutionary computing technology using quantum mechanics principles",
            "growth_rate": "200% over next 5 years",
            "skills_needed": ["Physics", "Mathematics", "Computer Science", "Problem Solving"],
            "timeline": "5-10 years to mainstream adoption",
            "examples": ["Quantum Software Developer", "Quantum Research Scientist", "Quantum Security Analyst"],
            "preparation_tips": ["Strong foundation in physics and math", "Learn quantum programming languages", "Follow quantum research publications"],
        },
        {
            "name": "Space Technology",
            "description": "Commercial space exploration and satellite technology advancement",
            "growth_rate": "150% over next 5 years",
            "skills_needed": ["Aerospace Engineering", "Materials Science", "Robotics", "Systems Design"],
            "timeline": "3-7 years for various roles",
            "examples": ["Spacecraft Engineer", "Mission Specialist", "Space Data Analyst"],
            "preparation_tips": ["Study aerospace engineering", "Gain experience with simulation software", "Follow space industry developments"],
        },
        {
            "name": "Synthetic Biology",
            "description": "Engineering biological systems for various applications",
            "growth_rate": "180% over next 5 years",
            "skills_needed": ["Biology", "Engineering", "Computer Science", "Chemistry"],
            "timeline": "4-8 years for specialized roles",
            "examples": ["Biodesign Engineer", "Synthetic Biology Researcher", "Biotech Product Manager"],
            "preparation_tips": ["Strong biology and chemistry foundation", "Learn bioinformatics", "Understand bioethics"],
        },
        {
            "name": "Digital Wellness",
            "description": "Managing human well-being in an increasingly digital world",
            "growth_rate": "120% over next 5 years",
            "skills_needed": ["Psychology", "Technology", "Health Sciences", "Communication"],
            "timeline": "2-5 years for emerging roles",
            "examples": ["Digital Wellness Coach", "Tech Ethics Specialist", "Digital Detox Consultant"],
            "preparation_tips": ["Study psychology and human behavior", "Understand technology impact", "Develop counseling skills"],
        },
    ]


def get_industry_news(field: str) -> List[Dict[str, Any]]:
    # Same headlines for every field until a news feed is wired in.
    return [
        {
            "title": "AI Revolutionizes Healthcare Diagnosis",
            "summary": "Machine learning algorithms show 95% accuracy in early disease detection",
            "source": "TechHealth Today",
            "date": "2024-01-15",
            "relevance": "High",
        },
        {
            "title": "Green Energy Jobs Surge 40% This Year",
            "summary": "Renewable energy sector creates thousands of new positions",
            "source": "Energy Career News",
            "date": "2024-01-10",
            "relevance": "Medium",
        },
    ]


def get_market_conditions() -> Dict[str, Any]:
    return {
        "economic_indicators": {
            "gdp_growth": 2.3,
            "unemployment_rate": 3.7,
            "inflation_rate": 3.2,
        },
        "hot_skills": [
            {"skill": "Artificial Intelligence", "demand": "Very High", "growth": "+45%"},
            {"skill": "Cloud Computing", "demand": "High", "growth": "+32%"},
            {"skill": "Cybersecurity", "demand": "High", "growth": "+28%"},
        ],
        "emerging_industries": [
            "Quantum Computing",
            "Sustainable Technology",
            "Space Technology",
            "Synthetic Biology",
        ],
        "last_updated": datetime.now(timezone.utc).isoformat(),
    }


def get_salary_data(job_title: str, location: str) -> Dict[str, Any]:
    return {
        "job_title": job_title,
        "location": location,
        "average_salary": "$95,000",
        "salary_range": "$75,000 - $130,000",
        "experience_level": "Mid-level",
        "top_paying_companies": ["Google", "Microsoft", "Apple"],
        "benefits": ["Health Insurance", "401k", "Stock Options"],
        "last_updated": "2024-01-15",
    }


def get_data_sources() -> List[Dict[str, str]]:
    """External sources the trend tables are modelled on, with nominal status."""
    return [
        {"name": "Bureau of Labor Statistics", "status": "online",
         "description": "Job market trends and employment data", "url": "https://api.bls.gov"},
        {"name": "College Scorecard API", "status": "online",
         "description": "University data and rankings", "url": "https://api.data.gov/ed/collegescorecard"},
        {"name": "O*NET Web Services", "status": "online",
         "description": "Career information and skill requirements", "url": "https://services.onetcenter.org"},
        {"name": "News API", "status": "warning",
         "description": "Latest industry news and trends", "url": "https://newsapi.org"},
    ]
