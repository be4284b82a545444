"""First-letter uppercase overrides for page titles.

MediaWiki uppercases the first letter of a title with PHP's ``mb_strtoupper``,
which disagrees with Python's :meth:`str.upper` for a few hundred code points
(``ß`` stays ``ß`` instead of becoming ``SS``, ``ǆ`` becomes the titlecase ``ǅ``
rather than ``Ǆ``, and so on).

An empty string value means the character is left unchanged.
"""

from __future__ import annotations

from typing import Final

PHP_UPPER_OVERRIDES: Final[dict[str, str]] = {
    "ß": "",
    "ŉ": "",
    "ƀ": "",
    "ƚ": "",
    "ǅ": "",
    "ǆ": "ǅ",
    "ǈ": "",
    "ǉ": "ǈ",
    "ǋ": "",
    "ǌ": "ǋ",
    "ǰ": "",
    "ǲ": "",
    "ǳ": "ǲ",
    "ȼ": "",
    "ȿ": "",
    "ɀ": "",
    "ɂ": "",
    "ɇ": "",
    "ɉ": "",
    "ɋ": "",
    "ɍ": "",
    "ɏ": "",
    "ɐ": "",
    "ɑ": "",
    "ɒ": "",
    "ɜ": "",
    "ɡ": "",
    "ɥ": "",
    "ɦ": "",
    "ɪ": "",
    "ɫ": "",
    "ɬ": "",
    "ɱ": "",
    "ɽ": "",
    "ʂ": "",
    "ʇ": "",
    "ʉ": "",
    "ʌ": "",
    "ʝ": "",
    "ʞ": "",
    "ͅ": "",
    "ͱ": "",
    "ͳ": "",
    "ͷ": "",
    "ͻ": "",
    "ͼ": "",
    "ͽ": "",
    "ΐ": "",
    "ΰ": "",
    "ϗ": "",
    "ϲ": "Σ",
    "ϳ": "",
    "ϸ": "",
    "ϻ": "",
    "ӏ": "",
    "ӷ": "",
    "ӻ": "",
    "ӽ": "",
    "ӿ": "",
    "ԑ": "",
    "ԓ": "",
    "ԕ": "",
    "ԗ": "",
    "ԙ": "",
    "ԛ": "",
    "ԝ": "",
    "ԟ": "",
    "ԡ": "",
    "ԣ": "",
    "ԥ": "",
    "ԧ": "",
    "ԩ": "",
    "ԫ": "",
    "ԭ": "",
    "ԯ": "",
    "և": "",
    "ა": "",
    "ბ": "",
    "გ": "",
    "დ": "",
    "ე": "",
    "ვ": "",
    "ზ": "",
    "თ": "",
    "ი": "",
    "კ": "",
    "ლ": "",
    "მ": "",
    "ნ": "",
    "ო": "",
    "პ": "",
    "ჟ": "",
    "რ": "",
    "ს": "",
    "ტ": "",
    "უ": "",
    "ფ": "",
    "ქ": "",
    "ღ": "",
    "ყ": "",
    "შ": "",
    "ჩ": "",
    "ც": "",
    "ძ": "",
    "წ": "",
    "ჭ": "",
    "ხ": "",
    "ჯ": "",
    "ჰ": "",
    "ჱ": "",
    "ჲ": "",
    "ჳ": "",
    "ჴ": "",
    "ჵ": "",
    "ჶ": "",
    "ჷ": "",
    "ჸ": "",
    "ჹ": "",
    "ჺ": "",
    "ჽ": "",
    "ჾ": "",
    "ჿ": "",
    "ᏸ": "",
    "ᏹ": "",
    "ᏺ": "",
    "ᏻ": "",
    "ᏼ": "",
    "ᏽ": "",
    "ᲀ": "",
    "ᲁ": "",
    "ᲂ": "",
    "ᲃ": "",
    "ᲄ": "",
    "ᲅ": "",
    "ᲆ": "",
    "ᲇ": "",
    "ᲈ": "",
    "ᵹ": "",
    "ᵽ": "",
    "ᶎ": "",
    "ẖ": "",
    "ẗ": "",
    "ẘ": "",
    "ẙ": "",
    "ẚ": "",
    "ỻ": "",
    "ỽ": "",
    "ỿ": "",
    "ὐ": "",
    "ὒ": "",
    "ὔ": "",
    "ὖ": "",
    "ᾀ": "ᾈ",
    "ᾁ": "ᾉ",
    "ᾂ": "ᾊ",
    "ᾃ": "ᾋ",
    "ᾄ": "ᾌ",
    "ᾅ": "ᾍ",
    "ᾆ": "ᾎ",
    "ᾇ": "ᾏ",
    "ᾈ": "",
    "ᾉ": "",
    "ᾊ": "",
    "ᾋ": "",
    "ᾌ": "",
    "ᾍ": "",
    "ᾎ": "",
    "ᾏ": "",
    "ᾐ": "ᾘ",
    "ᾑ": "ᾙ",
    "ᾒ": "ᾚ",
    "ᾓ": "ᾛ",
    "ᾔ": "ᾜ",
    "ᾕ": "ᾝ",
    "ᾖ": "ᾞ",
    "ᾗ": "ᾟ",
    "ᾘ": "",
    "ᾙ": "",
    "ᾚ": "",
    "ᾛ": "",
    "ᾜ": "",
    "ᾝ": "",
    "ᾞ": "",
    "ᾟ": "",
    "ᾠ": "ᾨ",
    "ᾡ": "ᾩ",
    "ᾢ": "ᾪ",
    "ᾣ": "ᾫ",
    "ᾤ": "ᾬ",
    "ᾥ": "ᾭ",
    "ᾦ": "ᾮ",
    "ᾧ": "ᾯ",
    "ᾨ": "",
    "ᾩ": "",
    "ᾪ": "",
    "ᾫ": "",
    "ᾬ": "",
    "ᾭ": "",
    "ᾮ": "",
    "ᾯ": "",
    "ᾲ": "",
    "ᾳ": "ᾼ",
    "ᾴ": "",
    "ᾶ": "",
    "ᾷ": "",
    "ᾼ": "",
    "ῂ": "",
    "ῃ": "ῌ",
    "ῄ": "",
    "ῆ": "",
    "ῇ": "",
    "ῌ": "",
    "ῒ": "",
    "ΐ": "",
    "ῖ": "",
    "ῗ": "",
    "ῢ": "",
    "ΰ": "",
    "ῤ": "",
    "ῦ": "",
    "ῧ": "",
    "ῲ": "",
    "ῳ": "ῼ",
    "ῴ": "",
    "ῶ": "",
    "ῷ": "",
    "ῼ": "",
    "ⅎ": "",
    "ⅰ": "",
    "ⅱ": "",
    "ⅲ": "",
    "ⅳ": "",
    "ⅴ": "",
    "ⅵ": "",
    "ⅶ": "",
    "ⅷ": "",
    "ⅸ": "",
    "ⅹ": "",
    "ⅺ": "",
    "ⅻ": "",
    "ⅼ": "",
    "ⅽ": "",
    "ⅾ": "",
    "ⅿ": "",
    "ↄ": "",
    "ⓐ": "",
    "ⓑ": "",
    "ⓒ": "",
    "ⓓ": "",
    "ⓔ": "",
    "ⓕ": "",
    "ⓖ": "",
    "ⓗ": "",
    "ⓘ": "",
    "ⓙ": "",
    "ⓚ": "",
    "ⓛ": "",
    "ⓜ": "",
    "ⓝ": "",
    "ⓞ": "",
    "ⓟ": "",
    "ⓠ": "",
    "ⓡ": "",
    "ⓢ": "",
    "ⓣ": "",
    "ⓤ": "",
    "ⓥ": "",
    "ⓦ": "",
    "ⓧ": "",
    "ⓨ": "",
    "ⓩ": "",
    "ⰰ": "",
    "ⰱ": "",
    "ⰲ": "",
    "ⰳ": "",
    "ⰴ": "",
    "ⰵ": "",
    "ⰶ": "",
    "ⰷ": "",
    "ⰸ": "",
    "ⰹ": "",
    "ⰺ": "",
    "ⰻ": "",
    "ⰼ": "",
    "ⰽ": "",
    "ⰾ": "",
    "ⰿ": "",
    "ⱀ": "",
    "ⱁ": "",
    "ⱂ": "",
    "ⱃ": "",
    "ⱄ": "",
    "ⱅ": "",
    "ⱆ": "",
    "ⱇ": "",
    "ⱈ": "",
    "ⱉ": "",
    "ⱊ": "",
    "ⱋ": "",
    "ⱌ": "",
    "ⱍ": "",
    "ⱎ": "",
    "ⱏ": "",
    "ⱐ": "",
    "ⱑ": "",
    "ⱒ": "",
    "ⱓ": "",
    "ⱔ": "",
    "ⱕ": "",
    "ⱖ": "",
    "ⱗ": "",
    "ⱘ": "",
    "ⱙ": "",
    "ⱚ": "",
    "ⱛ": "",
    "ⱜ": "",
    "ⱝ": "",
    "ⱞ": "",
    "ⱡ": "",
    "ⱥ": "",
    "ⱦ": "",
    "ⱨ": "",
    "ⱪ": "",
    "ⱬ": "",
    "ⱳ": "",
    "ⱶ": "",
    "ⲁ": "",
    "ⲃ": "",
    "ⲅ": "",
    "ⲇ": "",
    "ⲉ": "",
    "ⲋ": "",
    "ⲍ": "",
    "ⲏ": "",
    "ⲑ": "",
    "ⲓ": "",
    "ⲕ": "",
    "ⲗ": "",
    "ⲙ": "",
    "ⲛ": "",
    "ⲝ": "",
    "ⲟ": "",
    "ⲡ": "",
    "ⲣ": "",
    "ⲥ": "",
    "ⲧ": "",
    "ⲩ": "",
    "ⲫ": "",
    "ⲭ": "",
    "ⲯ": "",
    "ⲱ": "",
    "ⲳ": "",
    "ⲵ": "",
    "ⲷ": "",
    "ⲹ": "",
    "ⲻ": "",
    "ⲽ": "",
    "ⲿ": "",
    "ⳁ": "",
    "ⳃ": "",
    "ⳅ": "",
    "ⳇ": "",
    "ⳉ": "",
    "ⳋ": "",
    "ⳍ": "",
    "ⳏ": "",
    "ⳑ": "",
    "ⳓ": "",
    "ⳕ": "",
    "ⳗ": "",
    "ⳙ": "",
    "ⳛ": "",
    "ⳝ": "",
    "ⳟ": "",
    "ⳡ": "",
    "ⳣ": "",
    "ⳬ": "",
    "ⳮ": "",
    "ⳳ": "",
    "ⴀ": "",
    "ⴁ": "",
    "ⴂ": "",
    "ⴃ": "",
    "ⴄ": "",
    "ⴅ": "",
    "ⴆ": "",
    "ⴇ": "",
    "ⴈ": "",
    "ⴉ": "",
    "ⴊ": "",
    "ⴋ": "",
    "ⴌ": "",
    "ⴍ": "",
    "ⴎ": "",
    "ⴏ": "",
    "ⴐ": "",
    "ⴑ": "",
    "ⴒ": "",
    "ⴓ": "",
    "ⴔ": "",
    "ⴕ": "",
    "ⴖ": "",
    "ⴗ": "",
    "ⴘ": "",
    "ⴙ": "",
    "ⴚ": "",
    "ⴛ": "",
    "ⴜ": "",
    "ⴝ": "",
    "ⴞ": "",
    "ⴟ": "",
    "ⴠ": "",
    "ⴡ": "",
    "ⴢ": "",
    "ⴣ": "",
    "ⴤ": "",
    "ⴥ": "",
    "ⴧ": "",
    "ⴭ": "",
    "ꙁ": "",
    "ꙃ": "",
    "ꙅ": "",
    "ꙇ": "",
    "ꙉ": "",
    "ꙋ": "",
    "ꙍ": "",
    "ꙏ": "",
    "ꙑ": "",
    "ꙓ": "",
    "ꙕ": "",
    "ꙗ": "",
    "ꙙ": "",
    "ꙛ": "",
    "ꙝ": "",
    "ꙟ": "",
    "ꙡ": "",
    "ꙣ": "",
    "ꙥ": "",
    "ꙧ": "",
    "ꙩ": "",
    "ꙫ": "",
    "ꙭ": "",
    "ꚁ": "",
    "ꚃ": "",
    "ꚅ": "",
    "ꚇ": "",
    "ꚉ": "",
    "ꚋ": "",
    "ꚍ": "",
    "ꚏ": "",
    "ꚑ": "",
    "ꚓ": "",
    "ꚕ": "",
    "ꚗ": "",
    "ꚙ": "",
    "ꚛ": "",
    "ꜣ": "",
    "ꜥ": "",
    "ꜧ": "",
    "ꜩ": "",
    "ꜫ": "",
    "ꜭ": "",
    "ꜯ": "",
    "ꜳ": "",
    "ꜵ": "",
    "ꜷ": "",
    "ꜹ": "",
    "ꜻ": "",
    "ꜽ": "",
    "ꜿ": "",
    "ꝁ": "",
    "ꝃ": "",
    "ꝅ": "",
    "ꝇ": "",
    "ꝉ": "",
    "ꝋ": "",
    "ꝍ": "",
    "ꝏ": "",
    "ꝑ": "",
    "ꝓ": "",
    "ꝕ": "",
    "ꝗ": "",
    "ꝙ": "",
    "ꝛ": "",
    "ꝝ": "",
    "ꝟ": "",
    "ꝡ": "",
    "ꝣ": "",
    "ꝥ": "",
    "ꝧ": "",
    "ꝩ": "",
    "ꝫ": "",
    "ꝭ": "",
    "ꝯ": "",
    "ꝺ": "",
    "ꝼ": "",
    "ꝿ": "",
    "ꞁ": "",
    "ꞃ": "",
    "ꞅ": "",
    "ꞇ": "",
    "ꞌ": "",
    "ꞑ": "",
    "ꞓ": "",
    "ꞔ": "",
    "ꞗ": "",
    "ꞙ": "",
    "ꞛ": "",
    "ꞝ": "",
    "ꞟ": "",
    "ꞡ": "",
    "ꞣ": "",
    "ꞥ": "",
    "ꞧ": "",
    "ꞩ": "",
    "ꞵ": "",
    "ꞷ": "",
    "ꞹ": "",
    "ꞻ": "",
    "ꞽ": "",
    "ꞿ": "",
    "ꟃ": "",
    "ꭓ": "",
    "ꭰ": "",
    "ꭱ": "",
    "ꭲ": "",
    "ꭳ": "",
    "ꭴ": "",
    "ꭵ": "",
    "ꭶ": "",
    "ꭷ": "",
    "ꭸ": "",
    "ꭹ": "",
    "ꭺ": "",
    "ꭻ": "",
    "ꭼ": "",
    "ꭽ": "",
    "ꭾ": "",
    "ꭿ": "",
    "ꮀ": "",
    "ꮁ": "",
    "ꮂ": "",
    "ꮃ": "",
    "ꮄ": "",
    "ꮅ": "",
    "ꮆ": "",
    "ꮇ": "",
    "ꮈ": "",
    "ꮉ": "",
    "ꮊ": "",
    "ꮋ": "",
    "ꮌ": "",
    "ꮍ": "",
    "ꮎ": "",
    "ꮏ": "",
    "ꮐ": "",
    "ꮑ": "",
    "ꮒ": "",
    "ꮓ": "",
    "ꮔ": "",
    "ꮕ": "",
    "ꮖ": "",
    "ꮗ": "",
    "ꮘ": "",
    "ꮙ": "",
    "ꮚ": "",
    "ꮛ": "",
    "ꮜ": "",
    "ꮝ": "",
    "ꮞ": "",
    "ꮟ": "",
    "ꮠ": "",
    "ꮡ": "",
    "ꮢ": "",
    "ꮣ": "",
    "ꮤ": "",
    "ꮥ": "",
    "ꮦ": "",
    "ꮧ": "",
    "ꮨ": "",
    "ꮩ": "",
    "ꮪ": "",
    "ꮫ": "",
    "ꮬ": "",
    "ꮭ": "",
    "ꮮ": "",
    "ꮯ": "",
    "ꮰ": "",
    "ꮱ": "",
    "ꮲ": "",
    "ꮳ": "",
    "ꮴ": "",
    "ꮵ": "",
    "ꮶ": "",
    "ꮷ": "",
    "ꮸ": "",
    "ꮹ": "",
    "ꮺ": "",
    "ꮻ": "",
    "ꮼ": "",
    "ꮽ": "",
    "ꮾ": "",
    "ꮿ": "",
    "ﬀ": "",
    "ﬁ": "",
    "ﬂ": "",
    "ﬃ": "",
    "ﬄ": "",
    "ﬅ": "",
    "ﬆ": "",
    "ﬓ": "",
    "ﬔ": "",
    "ﬕ": "",
    "ﬖ": "",
    "ﬗ": "",
    "𐑎": "",
    "𐑏": "",
    "𐓘": "",
    "𐓙": "",
    "𐓚": "",
    "𐓛": "",
    "𐓜": "",
    "𐓝": "",
    "𐓞": "",
    "𐓟": "",
    "𐓠": "",
    "𐓡": "",
    "𐓢": "",
    "𐓣": "",
    "𐓤": "",
    "𐓥": "",
    "𐓦": "",
    "𐓧": "",
    "𐓨": "",
    "𐓩": "",
    "𐓪": "",
    "𐓫": "",
    "𐓬": "",
    "𐓭": "",
    "𐓮": "",
    "𐓯": "",
    "𐓰": "",
    "𐓱": "",
    "𐓲": "",
    "𐓳": "",
    "𐓴": "",
    "𐓵": "",
    "𐓶": "",
    "𐓷": "",
    "𐓸": "",
    "𐓹": "",
    "𐓺": "",
    "𐓻": "",
    "𐳀": "",
    "𐳁": "",
    "𐳂": "",
    "𐳃": "",
    "𐳄": "",
    "𐳅": "",
    "𐳆": "",
    "𐳇": "",
    "𐳈": "",
    "𐳉": "",
    "𐳊": "",
    "𐳋": "",
    "𐳌": "",
    "𐳍": "",
    "𐳎": "",
    "𐳏": "",
    "𐳐": "",
    "𐳑": "",
    "𐳒": "",
    "𐳓": "",
    "𐳔": "",
    "𐳕": "",
    "𐳖": "",
    "𐳗": "",
    "𐳘": "",
    "𐳙": "",
    "𐳚": "",
    "𐳛": "",
    "𐳜": "",
    "𐳝": "",
    "𐳞": "",
    "𐳟": "",
    "𐳠": "",
    "𐳡": "",
    "𐳢": "",
    "𐳣": "",
    "𐳤": "",
    "𐳥": "",
    "𐳦": "",
    "𐳧": "",
    "𐳨": "",
    "𐳩": "",
    "𐳪": "",
    "𐳫": "",
    "𐳬": "",
    "𐳭": "",
    "𐳮": "",
    "𐳯": "",
    "𐳰": "",
    "𐳱": "",
    "𐳲": "",
    "𑣀": "",
    "𑣁": "",
    "𑣂": "",
    "𑣃": "",
    "𑣄": "",
    "𑣅": "",
    "𑣆": "",
    "𑣇": "",
    "𑣈": "",
    "𑣉": "",
    "𑣊": "",
    "𑣋": "",
    "𑣌": "",
    "𑣍": "",
    "𑣎": "",
    "𑣏": "",
    "𑣐": "",
    "𑣑": "",
    "𑣒": "",
    "𑣓": "",
    "𑣔": "",
    "𑣕": "",
    "𑣖": "",
    "𑣗": "",
    "𑣘": "",
    "𑣙": "",
    "𑣚": "",
    "𑣛": "",
    "𑣜": "",
    "𑣝": "",
    "𑣞": "",
    "𑣟": "",
    "𖹠": "",
    "𖹡": "",
    "𖹢": "",
    "𖹣": "",
    "𖹤": "",
    "𖹥": "",
    "𖹦": "",
    "𖹧": "",
    "𖹨": "",
    "𖹩": "",
    "𖹪": "",
    "𖹫": "",
    "𖹬": "",
    "𖹭": "",
    "𖹮": "",
    "𖹯": "",
    "𖹰": "",
    "𖹱": "",
    "𖹲": "",
    "𖹳": "",
    "𖹴": "",
    "𖹵": "",
    "𖹶": "",
    "𖹷": "",
    "𖹸": "",
    "𖹹": "",
    "𖹺": "",
    "𖹻": "",
    "𖹼": "",
    "𖹽": "",
    "𖹾": "",
    "𖹿": "",
    "𞤢": "",
    "𞤣": "",
    "𞤤": "",
    "𞤥": "",
    "𞤦": "",
    "𞤧": "",
    "𞤨": "",
    "𞤩": "",
    "𞤪": "",
    "𞤫": "",
    "𞤬": "",
    "𞤭": "",
    "𞤮": "",
    "𞤯": "",
    "𞤰": "",
    "𞤱": "",
    "𞤲": "",
    "𞤳": "",
    "𞤴": "",
    "𞤵": "",
    "𞤶": "",
    "𞤷": "",
    "𞤸": "",
    "𞤹": "",
    "𞤺": "",
    "𞤻": "",
    "𞤼": "",
    "𞤽": "",
    "𞤾": "",
    "𞤿": "",
    "𞥀": "",
    "𞥁": "",
    "𞥂": "",
    "𞥃": "",
}
