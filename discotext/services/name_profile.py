"""
@description 名称档案生成
@responsibility 组合名称信息、排序名和首字母，供社团、艺术家入库使用
"""

from discotext.schemas.text import NameProfile
from discotext.services.initial_detector import detect_initial
from discotext.services.name_utils import generate_name_info, generate_sort_name


def build_name_profile(name: str) -> NameProfile:
    name_info = generate_name_info(name)
    initial = detect_initial(name_info.name)

    return NameProfile(
        name=name_info.name,
        name_ja=name_info.name_ja,
        name_en=name_info.name_en,
        sort_name=generate_sort_name(name_info.name),
        initial_script=initial.initial_script,
        name_initial=initial.name_initial,
    )
