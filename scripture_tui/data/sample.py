"""Built-in sample corpus used when no corpus file is configured.

The book list is the complete 73-book canon; the verses are a handful of
public-domain (KJV) excerpts.
"""

from typing import Sequence

from scripture_tui.data.canon import Corpus
from scripture_tui.data.types import Book, Verse

_BOOK_TABLE: Sequence[tuple[str, str]] = (
    # Old Testament
    ("Genesis", "Gen"),
    ("Exodus", "Ex"),
    ("Leviticus", "Lev"),
    ("Numbers", "Num"),
    ("Deuteronomy", "Deut"),
    ("Joshua", "Josh"),
    ("Judges", "Judg"),
    ("Ruth", "Ruth"),
    ("1 Samuel", "1 Sam"),
    ("2 Samuel", "2 Sam"),
    ("1 Kings", "1 Kings"),
    ("2 Kings", "2 Kings"),
    ("1 Chronicles", "1 Chron"),
    ("2 Chronicles", "2 Chron"),
    ("Ezra", "Ezra"),
    ("Nehemiah", "Neh"),
    ("Tobit", "Tob"),
    ("Judith", "Jdt"),
    ("Esther", "Esth"),
    ("1 Maccabees", "1 Mac"),
    ("2 Maccabees", "2 Mac"),
    ("Job", "Job"),
    ("Psalms", "Ps"),
    ("Proverbs", "Prov"),
    ("Ecclesiastes", "Eccles"),
    ("Song of Solomon", "Song"),
    ("Wisdom", "Wis"),
    ("Sirach", "Sir"),
    ("Isaiah", "Is"),
    ("Jeremiah", "Jer"),
    ("Lamentations", "Lam"),
    ("Baruch", "Bar"),
    ("Ezekiel", "Ezek"),
    ("Daniel", "Dan"),
    ("Hosea", "Hos"),
    ("Joel", "Joel"),
    ("Amos", "Amos"),
    ("Obadiah", "Obad"),
    ("Jonah", "Jon"),
    ("Micah", "Mic"),
    ("Nahum", "Nahum"),
    ("Habakkuk", "Hab"),
    ("Zephaniah", "Zeph"),
    ("Haggai", "Hag"),
    ("Zechariah", "Zech"),
    ("Malachi", "Mal"),
    # New Testament
    ("Matthew", "Mt"),
    ("Mark", "Mk"),
    ("Luke", "Lk"),
    ("John", "Jn"),
    ("Acts", "Acts"),
    ("Romans", "Rom"),
    ("1 Corinthians", "1 Cor"),
    ("2 Corinthians", "2 Cor"),
    ("Galatians", "Gal"),
    ("Ephesians", "Eph"),
    ("Philippians", "Phil"),
    ("Colossians", "Col"),
    ("1 Thessalonians", "1 Thess"),
    ("2 Thessalonians", "2 Thess"),
    ("1 Timothy", "1 Tim"),
    ("2 Timothy", "2 Tim"),
    ("Titus", "Tit"),
    ("Philemon", "Philem"),
    ("Hebrews", "Heb"),
    ("James", "Jas"),
    ("1 Peter", "1 Pet"),
    ("2 Peter", "2 Pet"),
    ("1 John", "1 Jn"),
    ("2 John", "2 Jn"),
    ("3 John", "3 Jn"),
    ("Jude", "Jude"),
    ("Revelation", "Rev"),
)

BOOKS: tuple[Book, ...] = tuple(
    Book(number, name, abbr) for number, (name, abbr) in enumerate(_BOOK_TABLE, 1)
)

_VERSE_TABLE: Sequence[tuple[int, int, int, str]] = (
    (1, 1, 1, "In the beginning God created the heaven and the earth."),
    (1, 1, 2, "And the earth was without form, and void; and darkness was upon the face of the deep. "
              "And the Spirit of God moved upon the face of the waters."),
    (1, 1, 3, "And God said, Let there be light: and there was light."),
    (1, 1, 4, "And God saw the light, that it was good: and God divided the light from the darkness."),
    (1, 1, 5, "And God called the light Day, and the darkness he called Night. "
              "And the evening and the morning were the first day."),
    (1, 2, 1, "Thus the heavens and the earth were finished, and all the host of them."),
    (1, 2, 2, "And on the seventh day God ended his work which he had made; "
              "and he rested on the seventh day from all his work which he had made."),
    (1, 2, 3, "And God blessed the seventh day, and sanctified it: "
              "because that in it he had rested from all his work which God created and made."),
    (23, 23, 1, "The LORD is my shepherd; I shall not want."),
    (23, 23, 2, "He maketh me to lie down in green pastures: he leadeth me beside the still waters."),
    (23, 23, 3, "He restoreth my soul: he leadeth me in the paths of righteousness for his name's sake."),
    (23, 23, 4, "Yea, though I walk through the valley of the shadow of death, I will fear no evil: "
                "for thou art with me; thy rod and thy staff they comfort me."),
    (23, 23, 5, "Thou preparest a table before me in the presence of mine enemies: "
                "thou anointest my head with oil; my cup runneth over."),
    (23, 23, 6, "Surely goodness and mercy shall follow me all the days of my life: "
                "and I will dwell in the house of the LORD for ever."),
    (47, 5, 1, "And seeing the multitudes, he went up into a mountain: "
               "and when he was set, his disciples came unto him:"),
    (47, 5, 2, "And he opened his mouth, and taught them, saying,"),
    (47, 5, 3, "Blessed are the poor in spirit: for theirs is the kingdom of heaven."),
    (47, 5, 4, "Blessed are they that mourn: for they shall be comforted."),
    (47, 5, 5, "Blessed are the meek: for they shall inherit the earth."),
    (47, 5, 6, "Blessed are they which do hunger and thirst after righteousness: for they shall be filled."),
    (47, 5, 7, "Blessed are the merciful: for they shall obtain mercy."),
    (47, 5, 8, "Blessed are the pure in heart: for they shall see God."),
    (47, 5, 9, "Blessed are the peacemakers: for they shall be called the children of God."),
    (47, 6, 1, "Take heed that ye do not your alms before men, to be seen of them: "
               "otherwise ye have no reward of your Father which is in heaven."),
    (47, 6, 2, "Therefore when thou doest thine alms, do not sound a trumpet before thee, "
               "as the hypocrites do in the synagogues and in the streets, that they may have glory of men. "
               "Verily I say unto you, They have their reward."),
    (47, 6, 3, "But when thou doest alms, let not thy left hand know what thy right hand doeth:"),
    (47, 6, 4, "That thine alms may be in secret: and thy Father which seeth in secret himself "
               "shall reward thee openly."),
    (47, 6, 5, "And when thou prayest, thou shalt not be as the hypocrites are: for they love to pray "
               "standing in the synagogues and in the corners of the streets, that they may be seen of men. "
               "Verily I say unto you, They have their reward."),
    (50, 3, 14, "And as Moses lifted up the serpent in the wilderness, even so must the Son of man be lifted up:"),
    (50, 3, 15, "That whosoever believeth in him should not perish, but have eternal life."),
    (50, 3, 16, "For God so loved the world, that he gave his only begotten Son, "
                "that whosoever believeth in him should not perish, but have everlasting life."),
    (50, 3, 17, "For God sent not his Son into the world to condemn the world; "
                "but that the world through him might be saved."),
    (50, 3, 18, "He that believeth on him is not condemned: but he that believeth not is condemned already, "
                "because he hath not believed in the name of the only begotten Son of God."),
    (69, 4, 7, "Beloved, let us love one another: for love is of God; "
               "and every one that loveth is born of God, and knoweth God."),
    (69, 4, 8, "He that loveth not knoweth not God; for God is love."),
)

VERSES: tuple[Verse, ...] = tuple(Verse(*row) for row in _VERSE_TABLE)


def sample_corpus() -> Corpus:
    """Return the built-in sample corpus."""
    return Corpus(BOOKS, VERSES)
