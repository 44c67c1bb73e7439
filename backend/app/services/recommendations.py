# services/recommendations.py
"""Static recommendation tables and the rules that pick from them.

Nothing here consults a live data source; match scores are constants except
for the university score, which is a fixed formula over the profile.
"""
import re
from typing import Any, Dict, List

from app.services.profile_analysis import StudentProfile


def _has_strength(profile: StudentProfile, subject: str, above: int) -> bool:
    return any(s.subject == subject and s.level > above for s in profile.academic_strengths)


def _has_trait(profile: StudentProfile, trait: str, above: int) -> bool:
    return any(t.trait == trait and t.level > above for t in profile.personality_traits)


def generate_career_paths(profile: StudentProfile) -> List[Dict[str, Any]]:
    """Career paths whose interest or strength trigger matches, best match first."""
    interests = profile.interests
    paths = []

    if "Technology & Programming" in interests or _has_strength(profile, "Mathematics", 80):
        paths.append({
            "title": "Software Engineer",
            "description": "Design and develop software applications and systems",
            "match_percentage": 92,
            "required_strengths": ["Mathematics", "Problem Solving", "Logic"],
            "suggested_subjects": ["Computer Science", "Mathematics", "Physics"],
            "timeframe": "4-6 years",
            "colleges": ["MIT", "Stanford", "Carnegie Mellon", "UC Berkeley"],
            "courses": ["Computer Science", "Software Engineering", "Data Science"],
            "market_demand": "High",
        })

    if "Science & Research" in interests or _has_strength(profile, "Science", 85):
        paths.append({
            "title": "Biomedical Researcher",
            "description": "Conduct research to advance medical knowledge and treatments",
            "match_percentage": 88,
            "required_strengths": ["Science", "Research Skills", "Analytical Thinking"],
            "suggested_subjects": ["Biology", "Chemistry", "Mathematics", "Physics"],
            "timeframe": "6-8 years",
            "colleges": ["Harvard", "Johns Hopkins", "Mayo Clinic College"],
            "courses": ["Biomedical Sciences", "Molecular Biology", "Biochemistry"],
            "market_demand": "Growing",
        })

    if "Business & Entrepreneurship" in interests or _has_trait(profile, "Leadership", 80):
        paths.append({
            "title": "Business Analyst",
            "description": "Analyze business processes and recommend improvements",
            "match_percentage": 85,
            "required_strengths": ["Leadership", "Communication", "Analytical Skills"],
            "suggested_subjects": ["Business Studies", "Economics", "Mathematics"],
            "timeframe": "4-5 years",
            "colleges": ["Wharton", "Harvard Business School", "INSEAD"],
            "courses": ["Business Administration", "Economics", "Finance"],
            "market_demand": "High",
        })

    if "Healthcare & Medicine" in interests or _has_strength(profile, "Science", 90):
        paths.append({
            "title": "Medical Doctor",
            "description": "Diagnose and treat patients, promote health and wellness",
            "match_percentage": 90,
            "required_strengths": ["Science", "Empathy", "Problem Solving"],
            "suggested_subjects": ["Biology", "Chemistry", "Physics", "Mathematics"],
            "timeframe": "8-10 years",
            "colleges": ["Harvard Medical", "Johns Hopkins", "Mayo Medical School"],
            "courses": ["Pre-Med", "Biology", "Chemistry", "MCAT Preparation"],
            "market_demand": "High",
        })

    if "Arts & Design" in interests or _has_strength(profile, "Arts", 80):
        paths.append({
            "title": "UX/UI Designer",
            "description": "Design user experiences for digital products and applications",
            "match_percentage": 87,
            "required_strengths": ["Creativity", "Visual Design", "Problem Solving"],
            "suggested_subjects": ["Art", "Computer Science", "Psychology"],
            "timeframe": "3-4 years",
            "colleges": ["RISD", "Parsons", "Art Center College of Design"],
            "courses": ["Graphic Design", "HCI", "Digital Media"],
            "market_demand": "Growing",
        })

    return sorted(paths, key=lambda p: p["match_percentage"], reverse=True)


def get_recommended_colleges() -> List[Dict[str, Any]]:
    colleges = [
        {
            "name": "Massachusetts Institute of Technology",
            "location": "Cambridge, MA",
            "ranking": 1,
            "acceptance_rate": "7%",
            "tuition": "$53,450",
            "match_score": 95,
            "strengths": ["Engineering", "Computer Science", "Research"],
            "programs": ["Computer Science", "Electrical Engineering", "Aerospace Engineering"],
            "campus_life": "Highly collaborative, innovation-focused environment",
        },
        {
            "name": "Stanford University",
            "location": "Stanford, CA",
            "ranking": 2,
            "acceptance_rate": "4%",
            "tuition": "$56,169",
            "match_score": 92,
            "strengths": ["Technology", "Entrepreneurship", "Research"],
            "programs": ["Computer Science", "Engineering", "Business"],
            "campus_life": "Entrepreneurial spirit, beautiful campus, diverse student body",
        },
        {
            "name": "University of California, Berkeley",
            "location": "Berkeley, CA",
            "ranking": 3,
            "acceptance_rate": "17%",
            "tuition": "$14,253 (in-state)",
            "match_score": 88,
            "strengths": ["Public Research", "Engineering", "Liberal Arts"],
            "programs": ["EECS", "Engineering", "Sciences"],
            "campus_life": "Diverse, politically active, research-oriented",
        },
        {
            "name": "Carnegie Mellon University",
            "location": "Pittsburgh, PA",
            "ranking": 4,
            "acceptance_rate": "17%",
            "tuition": "$57,560",
            "match_score": 90,
            "strengths": ["Computer Science", "Engineering", "Arts"],
            "programs": ["Computer Science", "Robotics", "Information Systems"],
            "campus_life": "Tech-focused, collaborative, interdisciplinary",
        },
    ]
    return sorted(colleges, key=lambda c: c["match_score"], reverse=True)


def get_recommended_careers() -> List[Dict[str, Any]]:
    careers = [
        {
            "title": "Software Engineer",
            "description": "Design, develop, and maintain software applications and systems",
            "average_salary": "$105,000 - $180,000",
            "growth_rate": "25% (Much faster than average)",
            "education": "Bachelor's in Computer Science or related field",
            "skills": ["Programming", "Problem Solving", "System Design", "Collaboration"],
            "work_environment": "Tech companies, startups, remote work options",
            "match_score": 94,
        },
        {
            "title": "Data Scientist",
            "description": "Analyze complex data to help organizations make informed decisions",
            "average_salary": "$95,000 - $165,000",
            "growth_rate": "35% (Much faster than average)",
            "education": "Bachelor's/Master's in Data Science, Statistics, or Computer Science",
            "skills": ["Statistics", "Programming", "Machine Learning", "Communication"],
            "work_environment": "Various industries, research institutions, consulting",
            "match_score": 89,
        },
        {
            "title": "UX/UI Designer",
            "description": "Create user-friendly digital interfaces and experiences",
            "average_salary": "$75,000 - $130,000",
            "growth_rate": "13% (Faster than average)",
            "education": "Bachelor's in Design, HCI, or related field",
            "skills": ["Design", "User Research", "Prototyping", "Empathy"],
            "work_environment": "Design agencies, tech companies, freelance",
            "match_score": 85,
        },
        {
            "title": "Biomedical Engineer",
            "description": "Develop medical devices and solutions for healthcare challenges",
            "average_salary": "$88,000 - $140,000",
            "growth_rate": "6% (As fast as average)",
            "education": "Bachelor's in Biomedical Engineering or related field",
            "skills": ["Engineering", "Biology", "Problem Solving", "Innovation"],
            "work_environment": "Medical device companies, hospitals, research labs",
            "match_score": 82,
        },
    ]
    return sorted(careers, key=lambda c: c["match_score"], reverse=True)


CAREERS_BY_INTEREST: Dict[str, List[Dict[str, Any]]] = {
    "Technology & Programming": [
        {
            "title": "Software Engineer",
            "description": "Design, develop, and maintain software applications and systems",
            "average_salary": "$105,000 - $180,000",
            "growth_rate": "25% (Much faster than average)",
            "education": "Bachelor's in Computer Science or related field",
            "skills": ["Programming", "Problem Solving", "System Design", "Collaboration"],
            "work_environment": "Tech companies, startups, remote work options",
            "match_score": 94,
            "industry_outlook": "Excellent growth prospects with increasing digitization",
            "certifications": ["AWS Certified", "Google Cloud Professional", "Microsoft Azure"],
        }
    ],
    "Science & Research": [
        {
            "title": "Data Scientist",
            "description": "Analyze complex data to help organizations make informed decisions",
            "average_salary": "$95,000 - $165,000",
            "growth_rate": "35% (Much faster than average)",
            "education": "Bachelor's/Master's in Data Science, Statistics, or Computer Science",
            "skills": ["Statistics", "Programming", "Machine Learning", "Communication"],
            "work_environment": "Various industries, research institutions, consulting",
            "match_score": 89,
            "industry_outlook": "High demand across all sectors",
            "certifications": ["Certified Analytics Professional", "SAS Certified", "Tableau Desktop"],
        }
    ],
}


def fetch_career_data(interests: List[str]) -> List[Dict[str, Any]]:
    """Careers listed for any of the given interests, best match first."""
    careers = []
    for interest in interests:
        careers.extend(CAREERS_BY_INTEREST.get(interest, []))
    return sorted(careers, key=lambda c: c["match_score"], reverse=True)


def get_learning_resources() -> List[Dict[str, Any]]:
    return [
        {
            "title": "CS50: Introduction to Computer Science",
            "type": "Course",
            "provider": "Harvard University (edX)",
            "duration": "12 weeks",
            "level": "Beginner",
            "rating": 4.9,
            "description": "Comprehensive introduction to computer science and programming",
        },
        {
            "title": "Python for Everybody",
            "type": "Course",
            "provider": "University of Michigan (Coursera)",
            "duration": "8 weeks",
            "level": "Beginner",
            "rating": 4.8,
            "description": "Learn Python programming from scratch with practical projects",
        },
        {
            "title": "The Design of Everyday Things",
            "type": "Book",
            "provider": "Don Norman",
            "duration": "2-3 weeks",
            "level": "Beginner",
            "rating": 4.7,
            "description": "Essential reading for understanding user-centered design principles",
        },
        {
            "title": "AWS Certified Cloud Practitioner",
            "type": "Certification",
            "provider": "Amazon Web Services",
            "duration": "3-6 months",
            "level": "Intermediate",
            "rating": 4.6,
            "description": "Foundational certification for cloud computing knowledge",
        },
        {
            "title": "Khan Academy - Computer Programming",
            "type": "Platform",
            "provider": "Khan Academy",
            "duration": "Self-paced",
            "level": "Beginner",
            "rating": 4.5,
            "description": "Interactive programming courses and projects",
        },
    ]


_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def _parse_gpa(gpa: str) -> float:
    """Leading number of the GPA text ('3.9 (weighted)' -> 3.9); 3.0 when there is none."""
    match = _LEADING_NUMBER.match(gpa or "")
    return float(match.group(1)) if match else 3.0


def calculate_university_match(profile: StudentProfile, university: str) -> int:
    """Fixed-formula match score between a profile and a university, max 100."""
    score = 60
    gpa = _parse_gpa(profile.gpa)
    if gpa >= 3.8:
        score += 20
    if gpa >= 3.5:
        score += 10

    if "Technology & Programming" in profile.interests:
        score += 15
    if "Science & Research" in profile.interests:
        score += 10

    if profile.leadership:
        score += 10

    score += {"MIT": 5, "Stanford": 3}.get(university, 0)
    return min(score, 100)
