"""
@description 原曲匹配服务
@responsibility 将导入数据中的原曲名与官方曲目进行完全匹配 → 部分匹配的分阶段匹配
"""

from typing import Callable, Optional

from loguru import logger

from discotext.schemas.text import (
    MatchType,
    OfficialSong,
    SongCandidate,
    SongMatchResult,
)


# 未匹配的原曲统一关联到「その他」，并把原曲名存入 custom_song_name
OTHER_SONG_ID = "07999999"

ORIGINAL_SONG_NAME = "オリジナル"

ExactSearchFn = Callable[[str], list[OfficialSong]]
PartialSearchFn = Callable[[str, int], list[OfficialSong]]
FindOriginalFn = Callable[[], Optional[OfficialSong]]


def _to_candidates(
    songs: list[OfficialSong], match_type: MatchType
) -> tuple[SongCandidate, ...]:
    return tuple(
        SongCandidate(
            id=song.id,
            name=song.name,
            name_ja=song.name_ja,
            official_work_name=song.official_work_name,
            match_type=match_type,
        )
        for song in songs
    )


class SongMatcher:
    """原曲匹配器"""

    def __init__(
        self,
        exact_search: ExactSearchFn,
        partial_search: PartialSearchFn,
        find_original: FindOriginalFn,
        candidate_limit: int = 10,
        other_song_id: str = OTHER_SONG_ID,
    ):
        self._exact_search = exact_search
        self._partial_search = partial_search
        self._find_original = find_original
        self._candidate_limit = candidate_limit
        self._other_song_id = other_song_id

    def match_songs(self, original_names: list[str]) -> list[SongMatchResult]:
        return [self.match_song(name) for name in original_names]

    def match_song(self, original_name: str) -> SongMatchResult:
        """
        匹配单个原曲名

        Args:
            original_name: 原曲名

        Returns:
            SongMatchResult，未匹配时自动关联到「その他」
        """
        if not original_name or not original_name.strip():
            return SongMatchResult(
                original_name=original_name,
                match_type="none",
                auto_matched=False,
            )

        name = original_name.strip()

        if name == ORIGINAL_SONG_NAME:
            original_record = self._find_original()
            if original_record:
                return SongMatchResult(
                    original_name=name,
                    is_original=True,
                    match_type="exact",
                    candidates=_to_candidates([original_record], "exact"),
                    auto_matched=True,
                    selected_id=original_record.id,
                )
            logger.warning("未找到「オリジナル」记录，按普通曲名匹配")

        exact_matches = self._exact_search(name)
        if exact_matches:
            logger.debug(f"原曲完全匹配: {name} → {exact_matches[0].id}")
            return SongMatchResult(
                original_name=name,
                match_type="exact",
                candidates=_to_candidates(exact_matches, "exact"),
                auto_matched=True,
                selected_id=exact_matches[0].id,
            )

        partial_matches = self._partial_search(name, self._candidate_limit)
        if partial_matches:
            logger.debug(f"原曲部分匹配: {name}，候选 {len(partial_matches)} 个")
            return SongMatchResult(
                original_name=name,
                match_type="partial",
                candidates=_to_candidates(
                    partial_matches[: self._candidate_limit], "partial"
                ),
                auto_matched=False,
            )

        logger.debug(f"原曲未匹配，关联到其他: {name}")
        return SongMatchResult(
            original_name=name,
            match_type="none",
            auto_matched=True,
            selected_id=self._other_song_id,
            custom_song_name=name,
        )
