"""
Literal page content.

Everything the page shows lives here as frozen dataclasses. Lists render in
declaration order; nothing is computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


ACCENTS = ("blue", "purple", "green", "yellow", "red", "indigo", "gray")
PROJECT_COLORS = ("blue", "purple", "green", "yellow", "red", "gray")
ACHIEVEMENT_COLORS = ("yellow", "blue", "purple", "green")


def _check_color(kind: str, color: str, allowed: tuple[str, ...]) -> None:
    if color not in allowed:
        raise ValueError(f"{kind} color must be one of {', '.join(allowed)}; got {color!r}")


@dataclass(frozen=True)
class SocialLink:
    label: str
    href: str
    icon: str  # "github" | "linkedin" | "mail"
    aria_label: str = ""


@dataclass(frozen=True)
class Profile:
    name: str
    initials: str
    headline: str
    tagline: str
    bio: str
    # Each paragraph is a run of (text, accent) segments; accent None is plain text.
    about_paragraphs: tuple[tuple[tuple[str, Optional[str]], ...], ...]
    links: tuple[SocialLink, ...]


@dataclass(frozen=True)
class SkillBadge:
    label: str
    color: str

    def __post_init__(self) -> None:
        _check_color("Skill badge", self.color, ACCENTS)


@dataclass(frozen=True)
class SkillGroup:
    title: str
    color: str
    skills: tuple[str, ...]

    def __post_init__(self) -> None:
        _check_color("Skill group", self.color, ACCENTS)


@dataclass(frozen=True)
class InterestArea:
    title: str
    description: str
    color: str

    def __post_init__(self) -> None:
        _check_color("Interest area", self.color, ACCENTS)


@dataclass(frozen=True)
class Project:
    title: str
    subtitle: str
    description: str
    details: tuple[str, ...]
    technologies: tuple[str, ...]
    project_link: Optional[str] = None
    github_link: Optional[str] = None
    color: str = "gray"

    def __post_init__(self) -> None:
        _check_color("Project", self.color, PROJECT_COLORS)


@dataclass(frozen=True)
class ExperienceEntry:
    period: str
    role: str
    organization: str
    summary: str
    color: str
    bullets: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    upcoming: bool = False

    def __post_init__(self) -> None:
        _check_color("Experience", self.color, ACCENTS)


@dataclass(frozen=True)
class Achievement:
    title: str
    description: str
    icon: str
    color: str = "yellow"

    def __post_init__(self) -> None:
        _check_color("Achievement", self.color, ACHIEVEMENT_COLORS)


@dataclass(frozen=True)
class EducationEntry:
    institution: str
    program: str
    period: str
    color: str
    score: Optional[str] = None

    def __post_init__(self) -> None:
        _check_color("Education", self.color, ACCENTS)


@dataclass(frozen=True)
class Activity:
    title: str
    description: str


@dataclass(frozen=True)
class SiteContent:
    profile: Profile
    hero_badges: tuple[SkillBadge, ...]
    skill_groups: tuple[SkillGroup, ...]
    interests: tuple[InterestArea, ...]
    projects: tuple[Project, ...]
    experience: tuple[ExperienceEntry, ...]
    achievements: tuple[Achievement, ...]
    education: tuple[EducationEntry, ...]
    activities: tuple[Activity, ...]
    built_with: str = "Built with Python, Streamlit & ❤️"
    blog_note: str = "(Note: This is a basic blog setup. More posts and features coming soon!)"


GITHUB = SocialLink("GitHub", "https://github.com/8have5h", "github", "GitHub Profile")
LINKEDIN = SocialLink("LinkedIn", "https://www.linkedin.com/in/bhavesh-gurnani-410a68217", "linkedin", "LinkedIn Profile")
EMAIL = SocialLink("Email Me", "mailto:bhavesh.gurnani2003@gmail.com", "mail", "Send Email")


PROFILE = Profile(
    name="Bhavesh Gurnani",
    initials="BG",
    headline="Computer Science & Engineering @ IIT Delhi",
    tagline="Machine Learning Enthusiast",
    bio=(
        "I'm a passionate Computer Science student at IIT Delhi, driven by a strong foundation in "
        "mathematics and programming. I love exploring the frontiers of AI, particularly the "
        "intersections of machine learning, computer vision, and natural language processing."
    ),
    about_paragraphs=(
        (
            ("Currently, I'm pursuing a dual degree (B.Tech + M.Tech) in Computer Science & Engineering "
             "at IIT Delhi. My academic journey began strong, achieving ", None),
            ("AIR 116 in JEE Advanced", "yellow"),
            (", which opened the doors to this incredible institution.", None),
        ),
        (
            ("My core fascination lies within ", None),
            ("Machine Learning", "blue"),
            (" and ", None),
            ("Deep Learning", "purple"),
            (". I'm particularly interested in understanding how these complex models work, which leads "
             "me to the field of ", None),
            ("Mechanistic Interpretability", "indigo"),
            (" – trying to reverse engineer neural networks to ensure AI systems are safe and aligned "
             "with human values (", None),
            ("AI Safety", "indigo"),
            (").", None),
        ),
        (
            ("I'm actively working on challenging problems like the ", None),
            ("ARC-AGI challenge", "green"),
            (", exploring techniques from program synthesis to model fine-tuning. I also have a strong "
             "background in ", None),
            ("Competitive Programming", "yellow"),
            (" which sharpens my algorithmic thinking.", None),
        ),
        (
            ("I'm always eager to learn, collaborate, and tackle complex problems. If you're interested "
             "in similar areas, feel free to reach out!", None),
        ),
    ),
    links=(GITHUB, LINKEDIN, EMAIL),
)

HERO_BADGES = (
    SkillBadge("Machine Learning", "blue"),
    SkillBadge("Deep Learning", "purple"),
    SkillBadge("C++", "green"),
    SkillBadge("Python", "yellow"),
    SkillBadge("NLP", "red"),
    SkillBadge("AI Safety", "indigo"),
)

SKILL_GROUPS = (
    SkillGroup("Programming Languages", "blue", ("Python", "C++", "C", "Java", "JavaScript", "SML", "Prolog", "VHDL")),
    SkillGroup(
        "Frameworks & Libraries",
        "green",
        ("PyTorch", "TensorFlow", "Keras", "Scikit-learn", "NumPy", "Pandas", "Django", "Flask", "React", "LLVM"),
    ),
    SkillGroup("Tools & Platforms", "purple", ("Git", "Docker", "Linux", "HPC", "VS Code", "Jupyter")),
)

INTERESTS = (
    InterestArea("Machine Learning & Deep Learning", "Neural networks, optimization, RL, generative models", "purple"),
    InterestArea("Mechanistic Interpretability & AI Safety", "Understanding NNs, alignment, robustness", "indigo"),
    InterestArea("Natural Language Processing", "LLMs, generation, summarization, QA", "blue"),
    InterestArea("Computer Vision", "Object-centric learning, diffusion models", "green"),
    InterestArea("Abstract Reasoning & AGI", "ARC challenge, program synthesis, cognitive architectures", "yellow"),
    InterestArea("Quantitative Finance & HFT", "Algorithmic trading strategies, market microstructure", "red"),
)

PROJECTS = (
    Project(
        title="ARC-AGI Challenge Exploration",
        subtitle="Tackling Abstract Reasoning via ML & Program Synthesis",
        description=(
            "Exploring solutions for the Abstraction and Reasoning Corpus (ARC) challenge, aiming to build AI "
            "with human-like fluid intelligence. This involves understanding core patterns from few examples."
        ),
        details=(
            "Implemented test-time fine-tuning on models for few-shot adaptation",
            "Utilized Depth First Search (DFS) during inference for structured problem-solving",
            "Investigated program synthesis approaches to generate solutions",
            "Currently exploring hybrid methods and looking for collaborators!",
            "Focusing on building generalizable reasoning capabilities",
        ),
        technologies=("Python", "PyTorch", "Few-Shot Learning", "Program Synthesis", "Search Algorithms", "AGI Research"),
        color="yellow",
        github_link="https://github.com/8have5h/ARC-AGI-Task",
        project_link="https://arcprize.org/",
    ),
    Project(
        title="AI Game Agent",
        subtitle="Intelligent Bot for Alternating Markov Games",
        description=(
            "I developed an advanced AI agent capable of playing strategic board games like Hex and Chess. "
            "It uses Depth-limited Minimax with heuristics trained via Reinforcement Learning."
        ),
        details=(
            "Developed game-specific heuristics for Hex, Chess, Rollerball",
            "Implemented Deep Q-Networks (DQN) for value approximation",
            "Integrated Monte Carlo Tree Search (MCTS) to enhance DQN",
            "Built a self-play framework for continuous improvement",
            "Analyzed trade-offs between search algorithms and heuristics",
        ),
        technologies=("Python", "TensorFlow", "Reinforcement Learning", "MCTS", "Minimax"),
        color="blue",
        github_link="https://github.com/8have5h/COL333-Assignment-1",
    ),
    Project(
        title="Object-Centric Vision Models",
        subtitle="Deep Learning for Object Identification & Generation",
        description=(
            "I implemented computer vision models focused on identifying and generating individual objects "
            "within images, improving interpretability and generation quality."
        ),
        details=(
            "Applied Slot Attention on CLEVRTex for unsupervised object discovery",
            "Developed a slot-conditioned diffusion model using PyTorch and VAEs",
            "Built UNet architecture from scratch with Residual and Transformer blocks",
            "Implemented Adjusted Rand Index (ARI) for evaluation",
            "Created visualization tools for model analysis",
        ),
        technologies=("PyTorch", "Computer Vision", "Diffusion Models", "UNet", "Transformers", "VAE"),
        color="purple",
        github_link="https://github.com/8have5h/COL775-Assignment-2",
    ),
    Project(
        title="Smart Table QA System",
        subtitle="Table Cell Classification for Question Answering",
        description=(
            "I created a system to analyze tables and pinpoint cells containing answers to natural language "
            "questions, automating data extraction from tabular data."
        ),
        details=(
            "Built transformer-based models for column and row prediction",
            "Integrated models to identify relevant cells from NL queries",
            "Prompt-tuned the Gemma model, significantly boosting accuracy",
            "Achieved 67% exact match accuracy (up from 43% baseline)",
            "Developed an evaluation framework for performance measurement",
        ),
        technologies=("Transformers", "NLP", "Prompt Tuning", "LLMs", "Gemma", "Python"),
        color="green",
        github_link="https://github.com/8have5h/COL772-Assignment-2",
    ),
    Project(
        title="Natural Language Math Solver",
        subtitle="Text to Mathematical Program Converter",
        description=(
            "I engineered an end-to-end system converting natural language math word problems into "
            "executable formulas to compute the final answer."
        ),
        details=(
            "Implemented Seq2Seq models (encoder-decoder architecture)",
            "Utilized Bi-LSTM with GloVe embeddings and Bahdanau attention",
            "Created a custom interpreter for executing generated formulas",
            "Achieved 67% exact match / 73% execution accuracy via beam search",
            "Improved to 78% / 81% by fine-tuning BERT as the encoder",
        ),
        technologies=("Seq2Seq", "LSTM", "BERT", "NLP", "Attention", "Beam Search"),
        color="yellow",
        github_link="https://github.com/8have5h/COL772-Assignment-1",
    ),
    Project(
        title="BioMed Simplifier",
        subtitle="Lay Summarization of Biomedical Research",
        description=(
            "I developed an AI to transform complex biomedical papers into understandable summaries for "
            "non-experts, aiming to bridge the science communication gap."
        ),
        details=(
            "Fine-tuned Pre-trained Language Models (PLMs) on HPC",
            "Employed Parameter-Efficient Fine-Tuning (PEFT) like LoRA",
            "Used mixed-precision training for efficiency",
            "Benchmarked against Flan-T5 and BioGPT",
            "Evaluated summaries on relevance, readability, and factuality",
        ),
        technologies=("PLMs", "PEFT", "LoRA", "Flan-T5", "BioGPT", "Summarization", "HPC"),
        color="red",
        github_link="https://github.com/8have5h/COL774-Project",
    ),
)

EXPERIENCE = (
    ExperienceEntry(
        period="Summer 2025 (Upcoming)",
        role="Quantitative Researcher Intern",
        organization="Ebullient Securities",
        summary=(
            "Excited for my upcoming Quant Research internship! I'll be diving into the world of "
            "high-frequency trading (HFT), applying my analytical and programming skills to develop and "
            "test trading strategies. Eager to learn from the team at Ebullient!"
        ),
        color="yellow",
        tags=("Quantitative Finance", "HFT", "Python", "C++", "Data Analysis"),
        upcoming=True,
    ),
    ExperienceEntry(
        period="May 2024 - July 2024",
        role="Verification Engineer Intern",
        organization="CompilerAI Labs Private Limited, New Delhi",
        summary=(
            "During my internship, I worked on implementing formal verification techniques for the Clang "
            "compiler, focusing on MISRA C rules and code equivalence checking."
        ),
        color="blue",
        bullets=(
            "Implemented MISRA C rules at the Preprocessor, AST, and LLVM IR levels.",
            "Developed rules for an Equivalence Checker comparing source code and executable.",
            "Collaborated with the team, analyzing the Clang codebase and using Git.",
        ),
        tags=("C++", "LLVM", "Clang", "Formal Verification"),
    ),
    ExperienceEntry(
        period="June 2022 - May 2023",
        role="Technical Executive",
        organization="Economics Club, CAIC, IIT Delhi",
        summary=(
            "I led the technical development for the Economics Club website, creating a platform for event "
            "management and competitions."
        ),
        color="purple",
        bullets=(
            "Designed and developed the web app using React.js.",
            "Implemented event management, registration, and payment features.",
            "Created an admin dashboard for content management.",
        ),
        tags=("React.js", "JavaScript", "Web Development"),
    ),
    ExperienceEntry(
        period="June 2022 - May 2023",
        role="Technical Engineer",
        organization="Infinity Hyperloop, CAIC, IIT Delhi",
        summary="As part of the student hyperloop team, I contributed to developing control systems for our pod prototype.",
        color="green",
        bullets=(
            "Designed a PyQt5 interface for pod control and real-time monitoring.",
            "Implemented sensor input processing and STM microcontroller communication via CAN.",
            "Developed data visualization components.",
        ),
        tags=("Python", "PyQt5", "CAN Protocol", "Embedded Systems"),
    ),
)

ACHIEVEMENTS = (
    Achievement("JEE Advanced 2021", "Achieved All India Rank 116 (Top ~0.06%)", "\U0001F3C6"),
    Achievement("JEE Mains 2021", "Achieved All India Rank 493 (100 Percentile in Maths)", "\U0001F3C5"),
    Achievement("KVPY Fellowship 2021", "Awarded Fellowship (AIR 305)", "\U0001F52C"),
    Achievement("NTSE Scholar 2019", "National Talent Search Examination Scholar", "\U0001F393"),
    Achievement("INMO Qualifier 2019", "Qualified for Indian National Mathematics Olympiad", "\U0001F9EE"),
)

EDUCATION = (
    EducationEntry(
        "Indian Institute of Technology Delhi",
        "B.Tech + M.Tech (Dual Degree), Computer Science & Engineering",
        "2021 - Present",
        "blue",
        score="CGPA: 8.5",
    ),
    EducationEntry("Lord Buddha Public School", "Senior Secondary (Class XII), CBSE", "Completed 2021", "purple"),
    EducationEntry("Lord Buddha Public School", "Secondary (Class X), CBSE", "Completed 2019", "green"),
)

ACTIVITIES = (
    Activity(
        "Enactus IITD Career Platform",
        "As a backend developer, I helped build a career upskilling platform using Django & MySQL (2023).",
    ),
    Activity(
        "Harvard CS50x Course",
        "Completed Harvard's foundational CS course covering C, Python, web development, and security concepts (2021).",
    ),
)


SITE = SiteContent(
    profile=PROFILE,
    hero_badges=HERO_BADGES,
    skill_groups=SKILL_GROUPS,
    interests=INTERESTS,
    projects=PROJECTS,
    experience=EXPERIENCE,
    achievements=ACHIEVEMENTS,
    education=EDUCATION,
    activities=ACTIVITIES,
)
