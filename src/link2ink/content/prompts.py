"""Prompt templates for analysis and image synthesis.

Every analysis prompt ends with the same verification rules so the model
answers with a marker instead of inventing content it could not read.
"""

from __future__ import annotations

from ..sources.models import RepoFile, VideoMetadata
from .models import AspectRatio


def verification_rules(not_found: str, insufficient: str, safety: str) -> str:
    """Instructions telling the model when to answer with a failure marker."""
    return f"""VERIFICATION RULES (MANDATORY):
- Only use information you actually retrieved or read. Never invent facts, numbers or quotes.
- If the source cannot be found or accessed, answer with exactly: {not_found}
- If the source exists but has too little content for an infographic, answer with exactly: {insufficient}
- If the content violates safety policies, answer with exactly: {safety}"""


def article_analysis_prompt(url: str, language: str, rules: str) -> str:
    return f"""ROLE: Senior Analyst & Visual Communicator.
TASK: Analyze the following URL content to create a structured brief for an infographic.
URL: {url}

INSTRUCTIONS:
Read the content and extract specific, high-value information. Do not just summarize abstractly.

REQUIRED OUTPUT STRUCTURE ({language}):
1. **HEADLINE**: A catchy, 5-7 word title that summarizes the benefit.
2. **THE "WHY"**: One sentence explaining why this topic matters right now.
3. **KEY STATS DATABASE**: Extract every specific number, date, percentage, or price mentioned. List them.
4. **ACTIONABLE TAKEAWAYS**: Convert paragraphs into a 5-step checklist or "How-To" list.
5. **EXPERT INSIGHT**: Find a quote or a specific prediction mentioned in the text.
6. **PROS/CONS (if applicable)**: If the article compares things, list the distinct advantages and disadvantages.

{rules}

Output strictly in {language}."""


def document_analysis_prompt(aspect_ratio: AspectRatio, language: str, rules: str) -> str:
    return f"""TASK: Analyze this document for a {aspect_ratio.value} Infographic ({language}).

REQUIREMENTS:
- Extract the Document Title.
- Extract the Executive Summary (2 sentences).
- List the Top 5 Key Findings/Data points.
- Identify any Charts/Graphs described and summarize their trend (e.g., "Sales increased by 20%").
- Conclusion/Recommendation.

{rules}

Output strictly in {language}."""


def text_brief_template(text: str, aspect_ratio: AspectRatio, language: str) -> str:
    """Data-editor framing for raw text; also used verbatim when text analysis is off."""
    return f"""RAW DATA SOURCE:
{text}

INSTRUCTION:
Act as a Data Editor. Refine this text for a {aspect_ratio.value} Infographic in {language}.
1. Identify the Main Theme.
2. Extract 3-5 Key Bullet Points.
3. If there are numbers, highlight them as "Big Stats".
4. Create a "Bottom Line" conclusion."""


def text_analysis_prompt(text: str, aspect_ratio: AspectRatio, language: str, rules: str) -> str:
    return f"""{text_brief_template(text, aspect_ratio, language)}

{rules}

Output strictly in {language}."""


def video_analysis_prompt(
    video_id: str,
    video_url: str,
    aspect_ratio: AspectRatio,
    language: str,
    rules: str,
    metadata: VideoMetadata | None = None,
) -> str:
    known = ""
    if metadata and (metadata.title or metadata.author_name):
        lines = ["KNOWN VIDEO METADATA (use to confirm you found the right video):"]
        if metadata.title:
            lines.append(f"- Title: {metadata.title}")
        if metadata.author_name:
            lines.append(f"- Channel: {metadata.author_name}")
        if metadata.description:
            lines.append(f"- Description: {metadata.description[:500]}")
        lines.append(
            "If your sources describe a different video than this one, treat the video as not found."
        )
        known = "\n".join(lines) + "\n"

    return f"""ROLE: Expert Data Journalist & Instructional Designer.
TASK: Deeply analyze the YouTube Video (ID: {video_id}) for a high-density {aspect_ratio.orientation} Infographic.

TARGET VIDEO: {video_url}
{known}
INVESTIGATION PROTOCOL (PRIORITY ORDER):
1. **PRIMARY (TRANSCRIPT/CONTENT)**: First, attempt to access the actual spoken content/transcript of this video. If you can, base the analysis STRICTLY on this direct data.
2. **SECONDARY (SEARCH FALLBACK)**: ONLY if direct transcript access is impossible, search for "{video_url}", "{video_id} transcript" and "{video_id} key takeaways" to reconstruct the content from reviews and summaries.

EXTRACTION REQUIREMENTS ({language}):
1. **THE CORE HOOK**: The single most compelling idea (max 10 words).
2. **DATA & METRICS**: Specific numbers, percentages, dates or prices mentioned, clearly labelled.
3. **THE PROCESS/FRAMEWORK**: Exact steps for "how to" videos; "Arguments vs. Counter-arguments" for opinions.
4. **HIDDEN GEMS**: 1-2 counter-intuitive facts or insider tips.
5. **QUOTABLE MOMENT**: One powerful, short direct quote.
6. **VISUAL CUES**: Suggested icons for the key points.

{rules}

OUTPUT FORMAT (strictly in {language}):
A structured, rich summary optimized for visual layout. State at the start whether you used "Direct Transcript" or "Search Fallback"."""


def infographic_design_prompt(
    brief: str,
    style: str,
    language: str,
    aspect_ratio: AspectRatio,
    image_size: str,
) -> str:
    return f"""DESIGN TASK: Create a professional, high-density {aspect_ratio.orientation} Infographic ({image_size} Resolution).

CONTENT SOURCE:
{brief}

STYLE PARAMS:
- Visual Style: {style}
- Language: {language}

LAYOUT RULES FOR RICH DATA:
1. **Information Architecture**:
   - If the data has steps, draw a **Flowchart** or **Path**.
   - If the data has comparisons, use a **Split-Screen** or **Table** layout.
   - If the data is statistical, use **Big Number Cards** or **Donut Charts**.
2. **Typography**: Use a Massive Headline. Use distinct font weights for 'Labels' vs 'Body Text'.
3. **Visual Hierarchy**: The core hook must be the focal point. Tips belong in a distinct 'Tip Box' or footer.
4. **Color Theory**: High contrast, based on the style: {style}. Ensure text is legible.
5. **Density**: Avoid empty space. Fill the canvas with structured grids, icons and data points.

OUTPUT: A complete, polished, ready-to-share infographic image."""


def _paths(files: list[RepoFile], limit: int, separator: str) -> str:
    return separator.join(f.path for f in files[:limit])


def repo_technical_prompt(
    repo_name: str, files: list[RepoFile], limit: int, style: str, language: str, image_size: str
) -> str:
    return (
        f"Technical architecture diagram: {repo_name}. "
        f"Files: {_paths(files, limit, ', ')}. "
        f"Style: {style}. Language: {language}. {image_size} sharp typography."
    )


def repo_3d_prompt(repo_name: str, style: str, image_size: str) -> str:
    return (
        f"Create a futuristic 3D HOLOGRAPHIC visualization of the software architecture for {repo_name}. "
        f"Glowing nodes, floating code blocks, cyberpunk aesthetic. {style}. {image_size} Resolution."
    )


def repo_feature_poster_prompt(
    repo_name: str, files: list[RepoFile], limit: int, style: str, language: str, image_size: str
) -> str:
    return f"""TASK: Design a non-technical "Product Feature Poster" infographic for the application {repo_name}.

SOURCE CODE HINTS: {_paths(files, limit, ', ')}

DESIGN RULES:
1. DO NOT SHOW CODE. Only visualize what the application does, its features and user benefits.
2. STYLE: {style} (modern, clean, marketing oriented).
3. LANGUAGE: {language}.
4. CONTENT:
   - A large, attractive product title.
   - 3-4 main features with icons.
   - User benefit.
   - Modern UI mockup or illustration style.

Resolution: {image_size}."""


def repo_summary_prompt(repo_name: str, files: list[RepoFile], limit: int, language: str) -> str:
    return f"""Role: Senior Software Architect.
Context: Analysis of repository '{repo_name}'.
File Structure:
{_paths(files, limit, chr(10))}

Task: Create a structured summary of this application in {language}.

Output Format:
1. **Project Purpose**: What does it do? One sentence.
2. **Technology Stack**: Languages, frameworks and tools used.
3. **Core Features**: 3-5 bullet points of capabilities.
4. **Architecture Notes**: Patterns inferred from the folder structure.

Keep it professional and concise."""


def component_question_prompt(
    component: str, question: str, files: list[RepoFile], limit: int
) -> str:
    return (
        f"Role: Software Architect.\n"
        f"File Structure:\n{_paths(files, limit, chr(10))}\n\n"
        f"Component: {component}\n"
        f"Question: {question}"
    )
