"""Declarative kana classification source lines.

Each line has the form ``label=glyph1,glyph2,...``. Lines are inverted into
glyph -> label lookups by :mod:`substitutor_phonemizer.tables.repository`.
"""

from __future__ import annotations

VOWEL_LINES = (
    "a=ぁ,あ,か,が,さ,ざ,た,だ,な,は,ば,ぱ,ま,ゃ,や,ら,わ,ァ,ア,カ,ガ,サ,ザ,タ,ダ,ナ,ハ,バ,パ,マ,ャ,ヤ,ラ,ワ,a",
    "e=ぇ,え,け,げ,せ,ぜ,て,で,ね,へ,べ,ぺ,め,れ,ゑ,ェ,エ,ケ,ゲ,セ,ゼ,テ,デ,ネ,ヘ,ベ,ペ,メ,レ,ヱ,e",
    "i=ぃ,い,き,ぎ,し,じ,ち,ぢ,に,ひ,び,ぴ,み,り,ゐ,ィ,イ,キ,ギ,シ,ジ,チ,ヂ,ニ,ヒ,ビ,ピ,ミ,リ,ヰ,i",
    "o=ぉ,お,こ,ご,そ,ぞ,と,ど,の,ほ,ぼ,ぽ,も,ょ,よ,ろ,を,ォ,オ,コ,ゴ,ソ,ゾ,ト,ド,ノ,ホ,ボ,ポ,モ,ョ,ヨ,ロ,ヲ,o",
    "n=ん,n",
    "u=ぅ,う,く,ぐ,す,ず,つ,づ,ぬ,ふ,ぶ,ぷ,む,ゅ,ゆ,る,ゥ,ウ,ク,グ,ス,ズ,ツ,ヅ,ヌ,フ,ブ,プ,ム,ュ,ユ,ル,ヴ,u",
    "N=ン,ng",
)

# Bare-vowel kana -> romanized vowel sample name.
SUBSTITUTE_LINES = (
    "a=あ",
    "e=え",
    "i=い",
    "o=お",
    "n=ん",
    "u=う",
)

# Romanized vowel class -> bare-vowel kana. Rewrites any unmatched kana to the
# bare vowel it ends with, e.g. "か" -> "あ".
VOWEL_KANA_SUBSTITUTE_LINES = (
    "あ=a",
    "え=e",
    "い=i",
    "お=o",
    "ん=n",
    "う=u",
)

CONSONANT_LINES = (
    "k=か,き,く,け,こ,きゃ,きゅ,きょ",
    "g=が,ぎ,ぐ,げ,ご,ぎゃ,ぎゅ,ぎょ",
    "s=さ,し,す,せ,そ,しゃ,しゅ,しぇ,しょ",
    "z=ざ,じ,ず,ぜ,ぞ,じゃ,じゅ,じぇ,じょ",
    "t=た,ち,つ,て,と,ちゃ,ちゅ,ちぇ,ちょ",
    "d=だ,ぢ,でぃ,づ,どぅ,で,ど,",
    "n=な,に,ぬ,ね,の,にゃ,にゅ,にぇ,にょ",
    "h=は,ひ,ふ,へ,ほ,ひゃ,ひゅ,ひぇ,ひょ",
    "b=ば,び,ぶ,べ,ぼ,びゃ,びゅ,びぇ,びょ",
    "p=ぱ,ぴ,ぷ,ぺ,ぽ,ぴゃ,ぴゅ,ぴぇ,ぴょ",
    "m=ま,み,む,め,も,みゃ,みゅ,みぇ,みょ",
    "y=や,ゆ,いぇ,よ",
    "r=ら,り,る,れ,ろ,りゃ,りゅ,りぇ,りょ",
    "w=わ,うぃ,うぇ,を",
)
