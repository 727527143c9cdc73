"""
Built-in document content.

Used whenever the settings file carries no structured résumé data or contact
line. The summary uses **double asterisks** to mark bold runs.
"""

from vitae.contexts.layout.records import (
    Degree,
    Project,
    ResumeContent,
    Skill,
    WorkExperience,
)

DEFAULT_CONTACT = (
    "+1 (555) 010-0199 | you@example.com | linkedin.com/in/you | github.com/you | example.com"
)

# Substituted into the cover letter when no position is given
DEFAULT_POSITION = "advertised"

DEFAULT_SUMMARY = (
    "Experienced **machine learning and artificial intelligence engineer** with expertise in "
    "**data processing, design, testing, optimization, and deployment of ML models.** "
    "Equipped with a diverse and promising skill-set with **4+ years of measurable expertise.** "
    "Experienced with the latest cutting edge development algorithms, big data, supervised and "
    "unsupervised learning, classification, regression, discriminative modeling, and model "
    "performance analysis. Effective in self-managing independent projects, as well as "
    "collaborating as part of a productive team."
)

DEFAULT_SKILLS = (
    Skill(
        "Languages",
        (
            "C/C++",
            "Python",
            "R",
            "MATLAB",
            "Shell Scripting",
            "PHP",
            "HTML",
            "CSS",
            "JavaScript",
            "Java",
            "Rust",
            "SQL",
        ),
    ),
    Skill(
        "AI Concepts",
        (
            "Deep Learning",
            "Neural Networks",
            "Convolution",
            "LSTMs",
            "Regressive Algorithms",
            "Unsupervised Learning",
            "Genetic Programming",
            "Advanced Image Processing",
            "Facial Recognition",
            "Reinforcement Learning",
            "LLMs",
            "Transformer models",
            "ChatGPT/Bard",
            "A/B testing and Multi-arm testing",
            "and Distributed Production",
        ),
    ),
    Skill(
        "CS Concepts",
        (
            "Tensorflow",
            "PyTorch",
            "MLOps",
            "Kubernetes",
            "CUDA",
            "Keras",
            "memory management",
            "NumPy",
            "Pandas",
        ),
    ),
    Skill(
        "Leadership",
        (
            "Innovative",
            "Collaborative",
            "Creative",
            "Flexible",
            "Problem-solver",
            "Attention to Detail",
            "Efficient",
            "Leader",
        ),
    ),
)

DEFAULT_EMPLOYMENT = (
    WorkExperience(
        position="Senior Software Engineer",
        company="Wardrobe Depot",
        location="Los Angeles",
        start_date="Oct 2021",
        end_date="Present",
        highlights=(
            "Moved stack from Shopify to a customized full-stack web application utilizing a "
            "micro-services architecture on Kubernetes that easily scaled their customer "
            "bandwidth by 500% with an overall decrease in operating costs.",
            "Conducted cross cloud cost analysis on AWS EC2 and S3, GCP GKE, and Akamai Suite to "
            "identify the cheapest architectures for each average monthly user saving over "
            "$1,200 in cloud costs monthly.",
            "Designed git-triggered CI/CD pipelines with automated docker container optimization "
            "decreasing the time to production for new features by 3 weeks.",
        ),
    ),
    WorkExperience(
        position="Computational Analyst",
        company="HHMI",
        location="San Diego",
        start_date="June 2022",
        end_date="Feb 2023",
        highlights=(
            "Led and managed multiple projects focused on the integration cutting-edge AI & ML "
            "technologies into their facial recognition and 2-photon neural microscopy analysis "
            "pipeline decreasing time to publication by 6 months.",
            "Integrated neural and facial recognition pipelines creating an automated workflow "
            "increasing the number of experiments processed per day by over 200x.",
            "My novel procedures are now in-review for publish in 6 high-impact academic "
            "journals including Nature, Cell, and Science Signaling.",
        ),
    ),
    WorkExperience(
        position="Bioinformatics Engineer",
        company="Carver College of Medicine",
        location="Iowa City",
        start_date="May 2016",
        end_date="Aug 2018",
        highlights=(
            "Designed multiple data analysis pipelines for histology analysis, confocal "
            "microscopy, CT/MRI data, and alignment & quantification for genomics, "
            "transcriptomics, & proteomics shaving an average of 1 year off the data analysis "
            "timeline.",
            "Designed novel ML models for object recognition throughout microscopy and CT imaging "
            "with an accuracy of 95%, roughly twice as good as the previous approach.",
            "Integrated all data processing with the university’s computational core, "
            "increasing data bandwidth by 500x.",
        ),
    ),
)

DEFAULT_EDUCATION = (
    Degree(
        university="Hampshire College",
        location="Amherst, MA",
        degree="Bachelors of the Arts",
        year="2022",
        description=(
            "Thesis focused on computational neuroscience with relevant courses including "
            "Epigenetics, Machine Learning, Research in Artificial Intelligence, Bioinformatics "
            "& Computational Molecular Biology, and Engineering Computing"
        ),
    ),
)

DEFAULT_PROJECTS = (
    Project(
        title="Lexicase Selection of Deep Neural Network Weights and Biases",
        organization="Hampshire College",
        year="2019",
    ),
    Project(
        title="Non-Canonical Alignment and Quantification Techniques",
        organization="Smith College",
        year="2020",
    ),
    Project(
        title="Trash based public wireless internet",
        organization="IowaBIG",
        year="2016",
        nickname="Poo Wi-Fi",
    ),
    Project(
        title="Combine neural and facial data from across experiments in one line of code",
        organization="HHMI",
        year="2023",
        nickname="SLEAPyFaces",
    ),
    Project(
        title="Instagram post scraper and algorithm performance analytics",
        organization="Personal",
        year="2023",
        nickname="InstaCrawl",
    ),
)

DEFAULT_RESUME = ResumeContent(
    skills=DEFAULT_SKILLS,
    employment=DEFAULT_EMPLOYMENT,
    education=DEFAULT_EDUCATION,
    projects=DEFAULT_PROJECTS,
    summary=DEFAULT_SUMMARY,
)

# Cover letter prose. Placeholders: {position}, {company}
LETTER_OPENING = (
    "I am writing to express my sincere interest in the {position} opportunity to work at "
    "{company}. My journey in the realm of machine learning and software engineering has "
    "ignited a deep passion for innovation and problem-solving. I am excited about the prospect "
    "of contributing to your dynamic team's achievements."
)

LETTER_BACKGROUND = (
    "My background is firmly rooted in machine learning, where I have designed and developed a "
    "range of models, from object recognition to genetic algorithms. These experiences have "
    "honed my ability to tackle complex challenges with creative solutions. One notable "
    "achievement was at HHMI, where I led a project resulting in a remarkable 50x performance "
    "improvement in ETL processes. This optimization facilitated the integration of facial "
    "recognition outputs with neuron segmentation data, enabling groundbreaking joint analyses "
    "of behavioral and microscopy data."
)

LETTER_MOTIVATION = (
    "My journey through computational publications, bioinformatics education, and "
    "comprehensive software engineering training has equipped me with a unique skill set. I am "
    "impressed by {company}’s reputation for innovation and its unwavering commitment to "
    "excellence. Your focus on experimentation and quality aligns seamlessly with my personal "
    "values and professional aspirations."
)

LETTER_CLOSING = (
    "Enclosed, please find my resume, which provides a comprehensive overview of my "
    "qualifications and accomplishments. I am genuinely eager to explore how my background and "
    "experience can contribute to your organization's continued growth. I welcome the "
    "opportunity to discuss how we can work together to achieve your strategic goals."
)

LETTER_THANKS = "Thank you for considering my application."
LETTER_SIGN_OFF = "Warm regards,"
