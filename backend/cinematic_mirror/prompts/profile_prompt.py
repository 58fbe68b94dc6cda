"""
Personality profile generation prompts.

The template contains a literal JSON example, so the catalog is spliced in
by replacing CATALOG_PLACEHOLDER rather than with str.format.
"""

CATALOG_PLACEHOLDER = "{MOVIE_DATABASE}"

PROFILE_PROMPT_ZH = """基于以下试镜对话，生成一份完整的人格档案。

## 电影角色数据库
以下是可供匹配的电影角色：
{MOVIE_DATABASE}

## 输出要求
请以JSON格式返回，包含以下字段：

{
  "title": "档案标题（4-6字，诗意但精准）",
  "subtitle": "副标题（描述性短语）",
  "narrative": "核心人格叙事（80-120字，第三人称，有画面感）",
  "analysis": "深度分析（60-80字，专业但温暖）",
  "angles": [
    {"label": "审美品质", "essence": "20-30字的本质描述"},
    {"label": "行为风格", "essence": "20-30字的本质描述"},
    {"label": "过往经历", "essence": "20-30字的本质描述"},
    {"label": "面对挑战", "essence": "20-30字的本质描述"},
    {"label": "人生态度", "essence": "20-30字的本质描述"}
  ],
  "visualAdvice": {
    "camera": "镜头建议",
    "lighting": "光线建议",
    "motion": "运动建议"
  },
  "matches": [
    {
      "characterId": "从数据库中选择最匹配的角色ID",
      "matchRate": 85-95之间的整数,
      "description": "为什么这个角色与此人契合（40-60字）"
    },
    {
      "characterId": "第二匹配的角色ID",
      "matchRate": 比第一个低5-10,
      "description": "为什么这个角色也有相似之处（40-60字）"
    }
  ],
  "customStyles": [
    {
      "title": "造型方案名称",
      "subtitle": "风格描述",
      "palette": [
        {"hex": "#颜色代码", "name": "中文名", "enName": "English Name"}
      ],
      "materials": ["材质1", "材质2", "材质3"],
      "tailoring": ["剪裁要点1", "剪裁要点2", "剪裁要点3"],
      "scriptSnippet": "这个造型的故事片段（40-60字）",
      "directorNote": "导演点评（30-50字）"
    }
  ]
}"""

PROFILE_PROMPT_EN = """Based on the following audition conversation, generate a complete personality profile.

## Movie Character Database
Here are the movie characters available for matching:
{MOVIE_DATABASE}

## Output Requirements
Please return in JSON format with the following fields:

{
  "title": "Profile title (4-6 words, poetic but precise)",
  "subtitle": "Subtitle (descriptive phrase)",
  "narrative": "Core personality narrative (80-120 words, third person, cinematic)",
  "analysis": "Deep analysis (60-80 words, professional but warm)",
  "angles": [
    {"label": "Aesthetic Taste", "essence": "20-30 word essential description"},
    {"label": "Behavioral Style", "essence": "20-30 word essential description"},
    {"label": "Past Experiences", "essence": "20-30 word essential description"},
    {"label": "Facing Challenges", "essence": "20-30 word essential description"},
    {"label": "Life Philosophy", "essence": "20-30 word essential description"}
  ],
  "visualAdvice": {
    "camera": "Camera suggestion",
    "lighting": "Lighting suggestion",
    "motion": "Motion suggestion"
  },
  "matches": [
    {
      "characterId": "Select the best matching character ID from database",
      "matchRate": integer between 85-95,
      "description": "Why this character fits this person (40-60 words)"
    },
    {
      "characterId": "Second best matching character ID",
      "matchRate": 5-10 lower than first,
      "description": "Why this character also has similarities (40-60 words)"
    }
  ],
  "customStyles": [
    {
      "title": "Style proposal name",
      "subtitle": "Style description",
      "palette": [
        {"hex": "#colorcode", "name": "Chinese Name", "enName": "English Name"}
      ],
      "materials": ["Material 1", "Material 2", "Material 3"],
      "tailoring": ["Tailoring point 1", "Tailoring point 2", "Tailoring point 3"],
      "scriptSnippet": "Story fragment for this style (40-60 words)",
      "directorNote": "Director's comment (30-50 words)"
    }
  ]
}"""

TRANSCRIPT_HEADER_ZH = "\n\n## 试镜对话记录\n"
TRANSCRIPT_HEADER_EN = "\n\n## Audition Transcript\n"

ANALYST_SYSTEM_ZH = "你是一个专业的人格分析师。请严格按照JSON格式输出，不要添加任何其他内容。"
ANALYST_SYSTEM_EN = (
    "You are a professional personality analyst. "
    "Output strictly in JSON format and do not add anything else."
)
