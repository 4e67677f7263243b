"""
Sample content inserted the first time a collection is listed while empty,
plus the documents singletons start from.
"""

ACHIEVEMENTS = [
    {
        "title": "Competitive Programming Finalist",
        "description": "Cleared the qualifying round of a national coding contest and competed in the final round.",
        "category": "Competitive Programming",
        "date": "2024",
        "order": 1,
    },
    {
        "title": "Technical Leadership",
        "description": "Leading technical initiatives for the campus AI club and mentoring 100+ students in programming.",
        "category": "Technical Leadership",
        "date": "Present",
        "order": 2,
    },
    {
        "title": "AI Project Innovation",
        "description": "Built an AI-powered resume analysis platform that improved user engagement by 40%.",
        "category": "Project Innovation",
        "date": "2025",
        "order": 3,
    },
    {
        "title": "Academic Excellence",
        "description": "Maintaining a strong GPA in Computer Science while contributing to technical clubs.",
        "category": "Academic Excellence",
        "date": "Ongoing",
        "order": 4,
    },
]

LEADERSHIP = [
    {
        "title": "Technical Head",
        "organization": "AI Club",
        "period": "2023 - Present",
        "description": "Leading innovation projects and mentoring peers on AI-powered web solutions.",
        "achievements": [
            "Organized coding workshops, technical sessions, and AI bootcamps for 100+ students",
            "Promoted problem-solving, competitive programming, and developer best practices",
        ],
        "order": 1,
    },
]

BLOGS = [
    {
        "title": "Getting Started with React Hooks",
        "date": "2024-01-15",
        "category": "React",
        "excerpt": "Learn how to use React Hooks to manage state and side effects in functional components.",
        "content": "React Hooks let you use state and other React features without writing a class. "
                   "This post covers useState, useEffect and writing your own custom hooks.",
        "image": "https://images.unsplash.com/photo-1633356122544-f134324ef6db?w=500&h=300&fit=crop",
        "readTime": "5 min read",
        "tags": ["react", "hooks", "javascript"],
        "published": True,
        "featured": False,
        "order": 1,
    },
    {
        "title": "Building Responsive Web Design",
        "date": "2024-01-10",
        "category": "Web Design",
        "excerpt": "Master the art of creating responsive websites that work on all devices.",
        "content": "Mobile-first layouts, media queries and fluid typography are the core of "
                   "websites that adapt to any screen size.",
        "image": "https://images.unsplash.com/photo-1561070791-2526d30994b5?w=500&h=300&fit=crop",
        "readTime": "7 min read",
        "tags": ["responsive", "css", "web-design"],
        "published": True,
        "featured": False,
        "order": 2,
    },
    {
        "title": "JavaScript ES6 Features You Should Know",
        "date": "2024-01-05",
        "category": "JavaScript",
        "excerpt": "Discover the most important ES6 features that will improve your coding productivity.",
        "content": "Arrow functions, destructuring, template literals, promises and async/await "
                   "changed how JavaScript is written.",
        "image": "https://images.unsplash.com/photo-1517694712202-14dd9538aa97?w=500&h=300&fit=crop",
        "readTime": "8 min read",
        "tags": ["javascript", "es6", "programming"],
        "published": True,
        "featured": False,
        "order": 3,
    },
]

PROJECTS = [
    {
        "title": "ApexResume",
        "subtitle": "AI Resume Analyzer",
        "description": "An AI-powered resume analysis platform providing ATS score, skill "
                       "recommendations, and job role suggestions.",
        "tech": ["React.js", "Node.js", "MongoDB", "Gemini API"],
        "date": "Jun 2025",
        "liveUrl": None,
        "githubUrl": None,
        "highlights": ["40% improved engagement", "ATS scoring", "AI-powered analysis"],
        "featured": True,
        "bgImage": "https://images.unsplash.com/photo-1507238691740-187a5b1d37b8?w=800&q=80",
        "caseStudy": {"problem": "", "approach": "", "impact": ""},
        "order": 1,
    },
    {
        "title": "NutroTrack",
        "subtitle": "Nutrition Tracker",
        "description": "A nutrition tracking dashboard with real-time calorie analytics and "
                       "interactive visualizations.",
        "tech": ["React.js", "REST APIs"],
        "date": "Oct 2024",
        "liveUrl": None,
        "githubUrl": None,
        "highlights": ["30% faster load time", "Real-time analytics", "Interactive charts"],
        "featured": False,
        "bgImage": "https://images.unsplash.com/photo-1490645935967-10de6ba17061?w=800&q=80",
        "caseStudy": {"problem": "", "approach": "", "impact": ""},
        "order": 2,
    },
]


def _skills(category, names_and_levels):
    return [
        {"name": name, "level": level, "category": category, "order": i}
        for i, (name, level) in enumerate(names_and_levels, start=1)
    ]


SKILLS = (
    _skills("Programming Languages", [("JavaScript", 85), ("Java (Core)", 80), ("C++", 75)])
    + _skills("Frontend", [("React.js", 90), ("HTML5", 95), ("CSS3", 90),
                           ("Tailwind CSS", 85), ("Bootstrap", 80)])
    + _skills("Backend", [("Node.js", 85), ("Express.js", 85), ("REST APIs", 80)])
    + _skills("Databases", [("MongoDB", 85), ("MySQL", 75)])
    + _skills("Cloud & Tools", [("Git", 90), ("GitHub", 90), ("AWS (Basic)", 65),
                                ("Gemini API", 80), ("GenAI Tools", 75)])
)

EDUCATION = [
    {
        "institution": "Institute of Engineering & Technology",
        "degree": "B.Tech, Computer Science & Engineering",
        "gpa": "CGPA: 8.1",
        "location": "Vizianagaram",
        "period": "2024 - Present",
        "description": None,
        "achievements": [],
        "current": True,
        "logoPath": None,
        "order": 1,
    },
    {
        "institution": "Government Polytechnic",
        "degree": "Diploma, Computer Engineering",
        "gpa": "Percentage: 85%",
        "location": "Kakinada",
        "period": "2021 - 2024",
        "description": None,
        "achievements": [],
        "current": False,
        "logoPath": None,
        "order": 2,
    },
]

HERO = {
    "name": "Your Name",
    "title": "AI & Full-Stack Development Enthusiast",
    "subtitle": "",
    "description": "Computer Science undergraduate building full-stack and AI-powered "
                   "applications, and mentoring student developers.",
    "tagline": "",
}

ABOUT = {
    "title": "Professional Summary",
    "description": "Computer Science undergraduate with strong experience in full-stack "
                   "development and AI-powered applications, active in developer community "
                   "building and technical workshops.",
    "highlights": [],
}

CONTACT = {
    "email": "hello@example.com",
    "phone": "",
    "location": "",
    "linkedin": "",
    "github": "",
    "leetcode": "",
    "portfolio": "",
    "message": "Open to collaborations, opportunities, and interesting conversations",
}
