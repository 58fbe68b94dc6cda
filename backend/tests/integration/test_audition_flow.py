"""
Integration test: a full English audition from first line to profile.
"""

import json

import pytest

from cinematic_mirror.models.enums import SessionStatus


@pytest.mark.asyncio
async def test_full_audition(client, llm, session_repo):
    llm.queue("[SPLIT] Sit. Tell me what you noticed in the corridor.")
    started = await client.post("/api/interview/start", json={"language": "en"})
    session_id = started.json()["data"]["sessionId"]

    for i in range(7):
        turn = (
            await client.post(f"/api/interview/session/{session_id}/message", json={"message": f"answer {i}"})
        ).json()["data"]
        assert turn["round"] == i + 2
        assert turn["isFinished"] is False

    llm.queue("Good. Cut.")
    final = (
        await client.post(f"/api/interview/session/{session_id}/message", json={"message": "that's all"})
    ).json()["data"]
    assert final["round"] == 9
    assert final["isFinished"] is True

    llm.queue(
        json.dumps(
            {
                "title": "The Quiet Lead",
                "subtitle": "Arrives early, watches everyone",
                "matches": [
                    {"characterId": "sally_whenharrymetsally", "matchRate": 88},
                    {"name": "Amélie", "movie": "Amélie"},
                ],
                "customStyles": [{"title": "Rain Coat Take"}],
            },
            ensure_ascii=False,
        )
    )
    generated = await client.post(f"/api/interview/session/{session_id}/generate?language=en")
    assert generated.status_code == 200
    profile = generated.json()["data"]

    assert profile["id"] != session_id
    assert len(profile["interview_history"]) == 17
    assert [m["name"] for m in profile["matches"]] == ["莎莉", "Amélie"]
    assert [v["title"] for v in profile["styling_variants"]] == ["蝴蝶结领的自持感", "Rain Coat Take"]

    record = await session_repo.get(session_id)
    assert record.status == SessionStatus.COMPLETED
    assert record.profile_id == profile["id"]

    again = await client.post(f"/api/interview/session/{session_id}/message", json={"message": "hello?"})
    assert again.status_code == 404
