"""
Static lookup tables for English-to-Marathi name transliteration.

Three tables feed :func:`admissions.services.transliteration.transliterate`:

``WHOLE_WORDS``
    Complete first names, surnames and kinship words.  A normalized input
    equal to one of these keys is returned as-is without any scanning.
``SYLLABLES``
    Two to four letter clusters (consonant + vowel, aspirated digraphs,
    long vowels and conjuncts) used by the greedy scanner.  Keys shorter
    than two letters are never probed and do not belong here.
``FALLBACK``
    One Devanagari grapheme for every Latin letter a-z.

The tables keep the historical phonetic choices of the intake forms
(``ta`` → ट but ``taa`` → त, and so on) so that names stored by earlier
versions are reproduced exactly.
"""
from __future__ import annotations

from types import MappingProxyType

_FIRST_NAMES = {
    'ram': 'राम',
    'rama': 'राम',
    'sita': 'सीता',
    'krishna': 'कृष्ण',
    'radha': 'राधा',
    'shiva': 'शिव',
    'parvati': 'पार्वती',
    'ganesh': 'गणेश',
    'lakshmi': 'लक्ष्मी',
    'vishnu': 'विष्णू',
    'brahma': 'ब्रह्मा',
    'saraswati': 'सरस्वती',
    'durga': 'दुर्गा',
    'hanuman': 'हनुमान',
    'arjun': 'अर्जुन',
    'bhim': 'भीम',
    'yudhishthir': 'युधिष्ठिर',
    'nakul': 'नकुल',
    'sahadev': 'सहदेव',
    'draupadi': 'द्रौपदी',
    'kunti': 'कुंती',
    'gandhari': 'गांधारी',
    'karna': 'कर्ण',
    'duryodhan': 'दुर्योधन',
    'bhishma': 'भीष्म',
    'drona': 'द्रोण',
    'ashwatthama': 'अश्वत्थामा',
    'abhimanyu': 'अभिमन्यू',
    'subhadra': 'सुभद्रा',
    'rukmini': 'रुक्मिणी',
    'meera': 'मीरा',
    'tukaram': 'तुकाराम',
    'namdev': 'नामदेव',
    'eknath': 'एकनाथ',
    'dnyaneshwar': 'ज्ञानेश्वर',
    'tukdoji': 'तुकडोजी',
    'ramdas': 'रामदास',
    'shivaji': 'शिवाजी',
    'sambhaji': 'संभाजी',
    'rajaram': 'राजाराम',
    'tarabai': 'ताराबाई',
    'ahilyabai': 'अहिल्याबाई',
    'bajirao': 'बाजीराव',
    'mastani': 'मस्तानी',
    'prithviraj': 'पृथ्वीराज',
    'samrat': 'सम्राट',
    'shashikant': 'शशिकांत',
    'ketan': 'केतन',
    'prafulla': 'प्रफुल्ल',
    'jitendra': 'जितेंद्र',
    'suresh': 'सुरेश',
    'mahesh': 'महेश',
    'rajesh': 'राजेश',
    'dinesh': 'दिनेश',
    'mukesh': 'मुकेश',
    'hitesh': 'हितेश',
    'ritesh': 'रितेश',
    'umesh': 'उमेश',
    'ramesh': 'रमेश',
    'naresh': 'नरेश',
    'yogesh': 'योगेश',
    'priya': 'प्रिया',
    'pooja': 'पूजा',
    'sneha': 'स्नेहा',
    'kavita': 'कविता',
    'sunita': 'सुनीता',
    'anita': 'अनिता',
    'geeta': 'गीता',
    'sushma': 'सुष्मा',
    'rekha': 'रेखा',
    'maya': 'माया',
    'lata': 'लता',
}

_SURNAMES = {
    'sharma': 'शर्मा',
    'verma': 'वर्मा',
    'gupta': 'गुप्ता',
    'agarwal': 'अग्रवाल',
    'agrawal': 'अग्रवाल',
    'singh': 'सिंह',
    'kumar': 'कुमार',
    'patel': 'पटेल',
    'shah': 'शाह',
    'jain': 'जैन',
    'bansal': 'बंसल',
    'goel': 'गोयल',
    'mittal': 'मित्तल',
    'joshi': 'जोशी',
    'kulkarni': 'कुलकर्णी',
    'deshpande': 'देशपांडे',
    'patil': 'पाटील',
    'jadhav': 'जाधव',
    'pawar': 'पवार',
    'more': 'मोरे',
    'shinde': 'शिंदे',
    'gaikwad': 'गायकवाड',
    'bhosale': 'भोसले',
    'salunkhe': 'सालुंखे',
    'kadam': 'कदम',
    'mane': 'माने',
    'sawant': 'सावंत',
    'raut': 'राऊत',
    'kale': 'काळे',
    'mali': 'माळी',
    'kamble': 'कांबळे',
    'thorat': 'थोरात',
    'chavan': 'चव्हाण',
    'yadav': 'यादव',
    'mahajan': 'महाजन',
    'desai': 'देसाई',
    'mehta': 'मेहता',
    'trivedi': 'त्रिवेदी',
    'pandey': 'पांडे',
    'mishra': 'मिश्रा',
    'tiwari': 'तिवारी',
    'dubey': 'दुबे',
    'chaturvedi': 'चतुर्वेदी',
    'shukla': 'शुक्ला',
    'srivastava': 'श्रीवास्तव',
    'rajput': 'राजपूत',
    'thakur': 'ठाकूर',
    'chouhan': 'चौहान',
    'rathore': 'राठोड',
    'solanki': 'सोलंकी',
    'parmar': 'परमार',
    'prajapati': 'प्रजापती',
    'hoshing': 'होशींग',
    'mulay': 'मुळे',
    'mulye': 'मुळे',
}

# Honorifics and kinship words that show up in the relative-name fields.
_HONORIFICS = {
    'rani': 'राणी',
    'maharaj': 'महाराज',
    'maharani': 'महाराणी',
    'aai': 'आई',
    'baba': 'बाबा',
    'mama': 'मामा',
    'kaka': 'काका',
    'tai': 'ताई',
    'dada': 'दादा',
    'nana': 'नाना',
    'aji': 'आजी',
    'ajoba': 'आजोबा',
    'anna': 'अण्णा',
    'didi': 'दीदी',
}

WHOLE_WORDS = MappingProxyType({**_FIRST_NAMES, **_SURNAMES, **_HONORIFICS})

SYLLABLES = MappingProxyType({
    # long vowels and diphthongs
    'aa': 'आ', 'ii': 'ई', 'uu': 'ऊ', 'ai': 'ऐ', 'au': 'औ',
    'an': 'अं', 'ah': 'अः',
    # velars / palatals
    'ka': 'क', 'kha': 'ख', 'ga': 'ग', 'gha': 'घ', 'nga': 'ङ',
    'cha': 'च', 'chha': 'छ', 'ja': 'ज', 'jha': 'झ', 'nya': 'ञ',
    # retroflex (short a) and dental (long a) series
    'ta': 'ट', 'tha': 'ठ', 'da': 'ड', 'dha': 'ढ', 'na': 'ण',
    'taa': 'त', 'thaa': 'थ', 'daa': 'द', 'dhaa': 'ध', 'naa': 'न',
    # labials, semivowels, sibilants
    'pa': 'प', 'pha': 'फ', 'ba': 'ब', 'bha': 'भ', 'ma': 'म',
    'ya': 'य', 'ra': 'र', 'la': 'ल', 'va': 'व', 'wa': 'व',
    'sha': 'श', 'shha': 'ष', 'sa': 'स', 'ha': 'ह',
    # conjuncts
    'ksha': 'क्ष', 'tra': 'त्र', 'gya': 'ज्ञ',
    # bare aspirated consonants
    'kh': 'ख', 'gh': 'घ', 'ch': 'च', 'jh': 'झ',
    'th': 'थ', 'dh': 'ध', 'ph': 'फ', 'bh': 'भ', 'sh': 'श',
})

FALLBACK = MappingProxyType({
    'a': 'अ', 'b': 'ब', 'c': 'च', 'd': 'द', 'e': 'ए', 'f': 'फ',
    'g': 'ग', 'h': 'ह', 'i': 'इ', 'j': 'ज', 'k': 'क', 'l': 'ल',
    'm': 'म', 'n': 'न', 'o': 'ओ', 'p': 'प', 'q': 'क', 'r': 'र',
    's': 'स', 't': 'त', 'u': 'उ', 'v': 'व', 'w': 'व', 'x': 'क्स',
    'y': 'य', 'z': 'झ',
})
