import random
from typing import Any, Dict, Optional
from urllib.parse import urlsplit


USER_AGENTS = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:109.0) Gecko/20100101 Firefox/110.0",
    "Mozilla/5.0 (Windows NT 10.0; rv:102.0) Gecko/20100101 Firefox/102.0",
    "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/109.0",
)

SITE_MARKER = "jiosaavn"

_TRUTHY_FLAGS = ("true", "1", "yes")


def pick_user_agent(seed: Optional[str] = None) -> str:
    rng = random.Random(seed) if seed is not None else random.Random()
    return rng.choice(USER_AGENTS)


def build_headers(user_agent: str) -> Dict[str, str]:
    return {
        "User-Agent": user_agent,
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.5",
        "Connection": "keep-alive",
        "Referer": "https://www.jiosaavn.com/",
    }


def dig(obj: Any, *path: Any) -> Optional[Any]:
    """Acceso anidado tolerante: devuelve None si falta algún tramo.

    Acepta claves de dict e índices de lista.
    """
    cur = obj
    for key in path:
        if isinstance(cur, dict):
            if key not in cur:
                return None
            cur = cur[key]
        elif isinstance(cur, list) and isinstance(key, int):
            if not -len(cur) <= key < len(cur):
                return None
            cur = cur[key]
        else:
            return None
    return cur


def last_path_segment(ref: str) -> str:
    # query y fragmento no forman parte del id
    path = urlsplit(ref).path if "://" in ref else ref.split("?", 1)[0].split("#", 1)[0]
    return path.rstrip("/").split("/")[-1]


def extract_song_id(song_ref: str) -> str:
    """Reduce un link de jiosaavn a su último segmento; un token suelto pasa igual."""
    ref = (song_ref or "").strip()
    if SITE_MARKER in ref:
        return last_path_segment(ref)
    return ref


def select_bitrate(more_info: Dict[str, Any]) -> str:
    # JioSaavn manda el flag como string ("true"/"false"), no como booleano
    flag = more_info.get("320kbps")
    if isinstance(flag, str):
        flag = flag.strip().lower() in _TRUTHY_FLAGS
    return "320" if flag else "128"
