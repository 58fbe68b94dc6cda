"""
Locale-keyed prompt tables.

Everything that varies by locale (persona scripts, canned user turns,
speaker labels, profile default strings, response messages) lives in one
PromptSet per locale. Services look the set up once and never branch on
the locale themselves.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from cinematic_mirror.models.enums import Gender, Locale
from cinematic_mirror.prompts import consultation_prompt as consultation
from cinematic_mirror.prompts import director_prompt as director
from cinematic_mirror.prompts import profile_prompt as profile


@dataclass(frozen=True)
class PromptSet:
    locale: Locale

    # Interview
    director_prompt: str
    subject_info_template: str
    audition_start: str
    unknown_value: str
    gender_labels: Mapping[Gender, str]

    # Profile synthesis
    profile_prompt: str
    transcript_header: str
    analyst_system: str
    subject_label: str
    director_label: str
    default_title: str
    default_subtitle: str
    unknown_role: str
    unknown_movie: str
    profile_format_error: str

    # Consultation / video chat
    consultation_prompt: str
    welcome_request: str
    video_chat_template: str
    video_fallback_system: str
    video_fallback_template: str
    video_empty_reply: str
    match_separator: str
    no_matches: str

    # Response messages
    audition_started: str
    profile_generated: str
    consultation_started: str
    consultation_ended: str

    def subject_info(self, name: Optional[str], gender: Optional[Gender]) -> str:
        """Render the subject-info block appended to the director prompt."""
        gender_text = self.gender_labels.get(gender, "") if gender else ""
        return self.subject_info_template.format(
            name=name or self.unknown_value,
            gender=gender_text or self.unknown_value,
        )


PROMPT_SETS: dict[Locale, PromptSet] = {
    Locale.ZH: PromptSet(
        locale=Locale.ZH,
        director_prompt=director.DIRECTOR_PROMPT_ZH,
        subject_info_template=director.SUBJECT_INFO_TEMPLATE_ZH,
        audition_start=director.AUDITION_START_ZH,
        unknown_value="未知",
        gender_labels={Gender.MALE: "男性", Gender.FEMALE: "女性"},
        profile_prompt=profile.PROFILE_PROMPT_ZH,
        transcript_header=profile.TRANSCRIPT_HEADER_ZH,
        analyst_system=profile.ANALYST_SYSTEM_ZH,
        subject_label="受试者",
        director_label="陆野导演",
        default_title="神秘访客",
        default_subtitle="等待解读",
        unknown_role="未知角色",
        unknown_movie="未知电影",
        profile_format_error="生成档案格式错误，请重试",
        consultation_prompt=consultation.CONSULTATION_PROMPT_ZH,
        welcome_request=consultation.WELCOME_REQUEST_ZH,
        video_chat_template=consultation.VIDEO_CHAT_PROMPT_TEMPLATE_ZH,
        video_fallback_system=consultation.VIDEO_FALLBACK_SYSTEM_ZH,
        video_fallback_template=consultation.VIDEO_FALLBACK_PROMPT_TEMPLATE_ZH,
        video_empty_reply=consultation.VIDEO_EMPTY_REPLY_ZH,
        match_separator="、",
        no_matches="无",
        audition_started="试镜开始",
        profile_generated="档案生成成功",
        consultation_started="咨询开始",
        consultation_ended="咨询结束",
    ),
    Locale.EN: PromptSet(
        locale=Locale.EN,
        director_prompt=director.DIRECTOR_PROMPT_EN,
        subject_info_template=director.SUBJECT_INFO_TEMPLATE_EN,
        audition_start=director.AUDITION_START_EN,
        unknown_value="Unknown",
        gender_labels={Gender.MALE: "male", Gender.FEMALE: "female"},
        profile_prompt=profile.PROFILE_PROMPT_EN,
        transcript_header=profile.TRANSCRIPT_HEADER_EN,
        analyst_system=profile.ANALYST_SYSTEM_EN,
        subject_label="Subject",
        director_label="Director Lu Ye",
        default_title="Mysterious Visitor",
        default_subtitle="Awaiting Interpretation",
        unknown_role="Unknown Role",
        unknown_movie="Unknown Movie",
        profile_format_error="Profile output was malformed, please try again",
        consultation_prompt=consultation.CONSULTATION_PROMPT_EN,
        welcome_request=consultation.WELCOME_REQUEST_EN,
        video_chat_template=consultation.VIDEO_CHAT_PROMPT_TEMPLATE_EN,
        video_fallback_system=consultation.VIDEO_FALLBACK_SYSTEM_EN,
        video_fallback_template=consultation.VIDEO_FALLBACK_PROMPT_TEMPLATE_EN,
        video_empty_reply=consultation.VIDEO_EMPTY_REPLY_EN,
        match_separator=", ",
        no_matches="None",
        audition_started="Audition started",
        profile_generated="Profile generated",
        consultation_started="Consultation started",
        consultation_ended="Consultation ended",
    ),
}


def get_prompt_set(locale: Locale) -> PromptSet:
    return PROMPT_SETS[locale]
