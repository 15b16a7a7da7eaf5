BENEFIT_SEPARATOR = '|'


def localized(en, ar, de, tr):
    return {'en': en, 'ar': ar, 'de': de, 'tr': tr}


def split_benefits(raw):
    if not raw:
        return []
    return raw.split(BENEFIT_SEPARATOR)
