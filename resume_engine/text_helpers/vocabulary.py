"""vocabulary.py
Static lookup tables used by the section segmenter, the field extractors and
the ATS matcher. Everything here is immutable; matching rules live in the
modules that read these tables.
"""
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Tuple

from resume_engine.models import SectionName

# ------------------------------------------------------------------
# Section headers
# ------------------------------------------------------------------
_SECTION_HEADER_SYNONYMS: Dict[SectionName, Tuple[str, ...]] = {
    "education": (
        "education",
        "academic",
        "academics",
        "academic background",
        "educational background",
        "academic history",
        "education history",
        "qualifications",
        "academic qualifications",
        "educational qualifications",
    ),
    "experience": (
        "experience",
        "experiences",
        "work",
        "employment",
        "work experience",
        "work history",
        "professional experience",
        "relevant experience",
        "industry experience",
        "technical experience",
        "employment history",
        "career history",
        "internships",
        "internship experience",
        "positions",
        "jobs",
    ),
    "projects": (
        "projects",
        "project",
        "portfolio",
        "personal projects",
        "side projects",
        "academic projects",
        "technical projects",
        "notable projects",
        "selected projects",
        "key projects",
        "relevant projects",
        "work samples",
        "open source",
        "open source projects",
    ),
    "skills": (
        "skills",
        "skill",
        "technologies",
        "technical skills",
        "core skills",
        "key skills",
        "relevant skills",
        "skills summary",
        "skill set",
        "skillset",
        "tech stack",
        "technical stack",
        "languages",
        "programming languages",
        "tools",
        "technical proficiencies",
        "proficiencies",
        "competencies",
        "core competencies",
        "technical competencies",
        "expertise",
        "areas of expertise",
    ),
}

# Normalized header text -> section it opens.
SECTION_HEADERS: Mapping[str, SectionName] = MappingProxyType({
    synonym: section
    for section, synonyms in _SECTION_HEADER_SYNONYMS.items()
    for synonym in synonyms
})

# Headers of sections this parser does not extract. They close the current
# section so their lines are discarded instead of misassigned.
OTHER_HEADERS: FrozenSet[str] = frozenset({
    "summary",
    "professional summary",
    "career summary",
    "executive summary",
    "objective",
    "career objective",
    "profile",
    "professional profile",
    "about",
    "about me",
    "contact",
    "contact information",
    "certifications",
    "certification",
    "certificates",
    "licenses",
    "licenses and certifications",
    "awards",
    "honors",
    "honours",
    "achievements",
    "accomplishments",
    "publications",
    "research",
    "patents",
    "volunteer",
    "volunteering",
    "volunteer experience",
    "volunteer work",
    "leadership",
    "leadership experience",
    "activities",
    "extracurricular activities",
    "extracurriculars",
    "interests",
    "hobbies",
    "references",
    "coursework",
    "relevant coursework",
    "courses",
    "training",
    "memberships",
    "affiliations",
    "additional information",
})

# Words that may join two header names ("Skills & Interests").
HEADER_JOINERS: FrozenSet[str] = frozenset({"&", "and", "/", "+", ","})

# Labels that introduce a project's or job's technology list. Inside those
# sections they are content, not a skills header.
TECH_STACK_LABELS: FrozenSet[str] = frozenset({
    "tech",
    "tech stack",
    "stack",
    "technologies",
    "technologies used",
    "tools",
    "tools used",
    "built with",
    "environment",
    "languages",
    "frameworks",
})

# ------------------------------------------------------------------
# Experience
# ------------------------------------------------------------------
ROLE_KEYWORDS: FrozenSet[str] = frozenset({
    "engineer", "developer", "programmer", "manager", "analyst", "designer",
    "intern", "internship", "lead", "director", "specialist", "coordinator",
    "consultant", "scientist", "architect", "administrator", "assistant",
    "associate", "officer", "researcher", "technician", "head", "vp",
    "president", "founder", "co-founder", "cto", "ceo", "cfo", "owner",
    "contractor", "freelancer", "teacher", "tutor", "instructor",
    "representative", "sde", "swe", "sre", "fellow", "trainee", "apprentice",
    "supervisor", "executive", "strategist", "editor", "writer",
})

# Separators tried, in order, when splitting an experience header line.
# For "at" and "@" the role is on the left.
EXPERIENCE_HEADER_SPLITTERS: Tuple[str, ...] = (
    " at ", " @ ", " | ", " — ", " – ", " - ", ", ",
)
ROLE_FIRST_SPLITTERS: FrozenSet[str] = frozenset({" at ", " @ "})

# ------------------------------------------------------------------
# Skills
# ------------------------------------------------------------------
# A skill item containing any of these reads like a sentence, not a skill.
SKILL_STOPLIST: FrozenSet[str] = frozenset({
    "developed", "built", "build", "led", "managed", "created", "designed",
    "implemented", "worked", "working", "improved", "increased", "reduced",
    "responsible", "collaborated", "maintained", "achieved", "delivered",
    "using", "used", "utilized", "is", "are", "was", "were", "have", "has",
    "had", "am", "will", "can", "i", "my", "we", "our",
    "proficient", "experienced", "familiar", "knowledge", "skilled",
    "years", "year",
})
SKILL_FILLER_WORDS: FrozenSet[str] = frozenset({
    "and", "or", "&", "etc", "etc.", "including", "other", "others", "more",
    "basic", "intermediate", "advanced", "fluent", "native",
})
SKILL_SPLIT_CHARACTERS: str = ",|;•●▪■◦‣·►▸➤→"

# ------------------------------------------------------------------
# Technology dictionary
# ------------------------------------------------------------------
# Canonical name -> extra spellings. Only names that are unambiguous in
# ordinary English prose are listed.
TECH_DICTIONARY: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Python": (),
    "JavaScript": ("js",),
    "TypeScript": ("ts",),
    "Java": (),
    "C++": ("cpp",),
    "C#": ("csharp",),
    "Golang": (),
    "Rust": (),
    "Kotlin": (),
    "PHP": (),
    "Scala": (),
    "SQL": (),
    "HTML": ("html5",),
    "CSS": ("css3",),
    "Sass": ("scss",),
    "React Native": (),
    "React": ("react.js", "reactjs"),
    "Next.js": ("nextjs",),
    "Vue": ("vue.js", "vuejs"),
    "Angular": ("angularjs",),
    "Svelte": ("sveltekit",),
    "Node.js": ("nodejs",),
    "Express.js": ("expressjs",),
    "NestJS": ("nest.js",),
    "Django": (),
    "Flask": (),
    "FastAPI": (),
    "Spring Boot": (),
    "Ruby on Rails": (),
    "Laravel": (),
    ".NET": ("asp.net", "dotnet"),
    "GraphQL": (),
    "REST API": ("rest apis", "restful api", "restful apis"),
    "PostgreSQL": ("postgres",),
    "MySQL": (),
    "SQLite": (),
    "MongoDB": (),
    "Redis": (),
    "DynamoDB": (),
    "Elasticsearch": (),
    "Firebase": (),
    "Supabase": (),
    "Prisma": (),
    "Docker": (),
    "Kubernetes": ("k8s",),
    "Terraform": (),
    "AWS": ("amazon web services",),
    "GCP": ("google cloud",),
    "Azure": (),
    "Vercel": (),
    "Heroku": (),
    "Kafka": (),
    "RabbitMQ": (),
    "Redux": (),
    "Tailwind CSS": ("tailwind", "tailwindcss"),
    "Three.js": ("threejs",),
    "D3.js": ("d3js",),
    "Flutter": (),
    "TensorFlow": (),
    "PyTorch": (),
    "scikit-learn": ("sklearn",),
    "Pandas": (),
    "NumPy": (),
    "OpenCV": (),
    "OpenAI": (),
    "LangChain": (),
    "Jest": (),
    "Pytest": (),
    "Cypress": (),
    "Playwright": (),
    "Selenium": (),
    "Git": (),
    "GitHub Actions": (),
    "Linux": (),
    "Nginx": (),
    "WebSockets": ("websocket", "socket.io"),
    "Stripe": (),
    "Figma": (),
})

# ------------------------------------------------------------------
# ATS keyword extraction
# ------------------------------------------------------------------
STOP_WORDS: FrozenSet[str] = frozenset({
    # Articles & determiners
    "a", "an", "the", "this", "that", "these", "those",
    # Prepositions
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "up", "about",
    "into", "through", "during", "before", "after", "above", "below", "between",
    "under", "over", "out", "off", "down", "across", "behind", "beyond", "within",
    "without", "per", "via", "like",
    # Conjunctions
    "and", "or", "but", "nor", "so", "yet", "both", "either", "neither",
    # Pronouns
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your",
    "yours", "yourself", "yourselves", "he", "him", "his", "himself", "she",
    "her", "hers", "herself", "it", "its", "itself", "they", "them", "their",
    "theirs", "themselves", "what", "which", "who", "whom", "whose", "us",
    # be / have / do and modals
    "is", "am", "are", "was", "were", "be", "been", "being", "have", "has",
    "had", "having", "do", "does", "did", "doing", "would", "should", "could",
    "ought", "might", "must", "shall", "will", "can", "may",
    # Auxiliary words
    "not", "no", "yes", "all", "any", "some", "each", "every", "such", "more",
    "most", "other", "than", "then", "now", "here", "there", "when", "where",
    "why", "how", "if", "because", "as", "until", "while", "although", "though",
    "also", "only", "own", "same", "just", "very", "even", "well", "back",
    "still", "way", "take", "come", "make", "get", "go", "see", "know", "e.g",
    "i.e", "etc", "plus", "least", "across", "new", "one", "two", "three",
    "first", "second",
    # Resume filler
    "responsible", "responsibilities", "responsibility", "ability", "able",
    "work", "working", "worked", "including", "included", "include", "using",
    "used", "use", "help", "helped", "helping", "ensure", "ensured", "ensuring",
    "provide", "provided", "providing", "strong", "excellent", "good", "great",
    "best", "experience", "experienced", "experiences", "years", "year", "team",
    "teams", "role", "position", "job", "company",
    # Job-posting filler
    "looking", "seeking", "seek", "hiring", "hire", "developer", "developers",
    "engineer", "engineers", "candidate", "candidates", "ideal", "join",
    "joining", "required", "requirement", "requirements", "require", "requires",
    "preferred", "prefer", "bonus", "nice", "have", "must", "skills", "skill",
    "knowledge", "understanding", "familiarity", "familiar", "proficiency",
    "proficient", "solid", "deep", "hands-on", "opportunity", "opportunities",
    "apply", "applicant", "applicants", "qualifications", "qualification",
    "minimum", "equivalent", "related", "relevant", "field", "degree",
    "environment", "fast-paced", "passionate", "talented", "motivated",
    "someone", "person", "people", "want", "wants", "need", "needs", "responsible",
    "day", "days", "benefits", "salary", "remote", "hybrid", "office", "full-time",
    "part-time", "based", "across", "build", "building", "built", "write",
    "writing", "written", "various", "multiple", "etc",
})

# Short tokens that are real keywords despite being under the length floor.
SHORT_KEYWORDS: FrozenSet[str] = frozenset({"c", "r"})

# Multi-word terms matched as one keyword before single tokens.
KNOWN_PHRASES: Tuple[str, ...] = (
    "natural language processing",
    "google cloud platform",
    "amazon web services",
    "infrastructure as code",
    "test driven development",
    "object oriented programming",
    "large language models",
    "large language model",
    "ruby on rails",
    "machine learning",
    "deep learning",
    "computer vision",
    "neural networks",
    "data science",
    "data engineering",
    "data analysis",
    "data structures",
    "data pipelines",
    "data visualization",
    "distributed systems",
    "system design",
    "software engineering",
    "software development",
    "computer science",
    "web development",
    "mobile development",
    "cloud computing",
    "big data",
    "react native",
    "spring boot",
    "google cloud",
    "github actions",
    "unit testing",
    "integration testing",
    "end to end testing",
    "version control",
    "project management",
    "product management",
    "problem solving",
    "rest api",
    "restful api",
    "full stack",
    "front end",
    "back end",
    "power bi",
    "tailwind css",
    "sql server",
    "microsoft azure",
    "user experience",
    "user interface",
    "a/b testing",
    "agile methodologies",
    "continuous integration",
    "continuous deployment",
)

# Spellings that name the same technology as one normalized keyword.
KEYWORD_ALIASES: Mapping[str, str] = MappingProxyType({
    "reactjs": "react",
    "react.js": "react",
    "nodejs": "node",
    "node.js": "node",
    "vuejs": "vue",
    "vue.js": "vue",
    "nextjs": "next.js",
    "expressjs": "express",
    "express.js": "express",
    "golang": "go",
    "postgres": "postgresql",
    "k8s": "kubernetes",
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "frontend": "front end",
    "front-end": "front end",
    "backend": "back end",
    "back-end": "back end",
    "fullstack": "full stack",
    "full-stack": "full stack",
    "restful": "rest",
    "cicd": "ci/cd",
    "gcp": "google cloud",
    "aws": "amazon web services",
})

# Technologies named in the "missing technical skills" tip.
ATS_TECH_KEYWORDS: FrozenSet[str] = frozenset(
    {name.lower() for name in TECH_DICTIONARY}
    | {alias for aliases in TECH_DICTIONARY.values() for alias in aliases}
    | {
        "go", "node", "next.js", "ruby", "swift", "c", "r", "matlab", "bash",
        "shell", "unix", "jenkins", "ansible", "circleci", "gitlab", "jira",
        "postman", "graphql", "rest", "ci/cd", "agile", "scrum", "tdd",
        "microservices", "serverless", "oauth", "jwt", "machine learning",
        "deep learning", "computer vision", "natural language processing",
        "amazon web services", "google cloud", "kubernetes", "spark", "airflow",
        "snowflake", "tableau", "front end", "back end", "full stack",
    }
)

# Slash-joined terms kept whole; other "a/b" tokens are split on the slash.
SLASH_KEYWORDS: FrozenSet[str] = frozenset({
    "ci/cd", "ui/ux", "tcp/ip", "a/b", "i/o", "pl/sql",
})
