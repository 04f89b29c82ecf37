"""
GBAIRAI - Reply Threading
Reconstruit l'ordre d'affichage des réponses d'un commentaire principal

Les réponses sont stockées à plat (parent_comment_id = commentaire principal).
L'attribution d'une réponse à une autre réponse se fait par le tag @username
en tête du contenu, ou par reply_to_id quand il est renseigné.

Résultat sur deux niveaux:
- réponses directes au commentaire, par ordre chronologique
- sous chacune, les réponses qui lui sont rattachées, par ordre chronologique

Limite connue: l'attribution par tag est une heuristique. Si plusieurs
réponses ont le même auteur, la première dans la liste est retenue; un
@mention qui n'est pas une réponse est interprété comme tel.
"""
import re
from typing import Dict, List, Optional, Sequence, Set

from gbairai.schemas.comment import ReplyRecord, ThreadedReply

TAG_PATTERN = re.compile(r"^@(\w+)")


def extract_tag(content: str) -> Optional[str]:
    """Nom d'utilisateur tagué en tête du contenu"""
    match = TAG_PATTERN.match(content)
    return match.group(1) if match else None


def _find_target(
    reply: ReplyRecord,
    replies: Sequence[ReplyRecord],
    by_id: Dict[int, ReplyRecord],
    parent_username: Optional[str],
) -> Optional[int]:
    """
    Réponse ciblée par `reply`, ou None si c'est une réponse directe
    """
    if reply.reply_to_id is not None and reply.reply_to_id != reply.id and reply.reply_to_id in by_id:
        return reply.reply_to_id

    tagged = extract_tag(reply.content)
    if tagged is None or tagged == parent_username:
        return None

    for candidate in replies:
        if candidate.id != reply.id and candidate.username == tagged:
            return candidate.id

    # tag sans réponse correspondante: réponse directe par défaut
    return None


def _cycle_members(targets: Dict[int, Optional[int]]) -> Set[int]:
    """Réponses qui appartiennent à un cycle de rattachement"""
    members: Set[int] = set()
    for start in targets:
        path: List[int] = []
        position: Dict[int, int] = {}
        current = start
        while current is not None and current not in position and current not in members:
            position[current] = len(path)
            path.append(current)
            current = targets[current]
        if current is not None and current in position:
            members.update(path[position[current]:])
    return members


def organize_replies(
    parent_username: Optional[str],
    replies: Sequence[ReplyRecord],
) -> List[ThreadedReply]:
    """
    Ordonne les réponses d'un commentaire pour un affichage à plat

    Une réponse rattachée à une réponse elle-même non directe est
    affichée sous la réponse directe de sa chaîne; aucune réponse n'est
    perdue. Les membres d'un cycle sont des réponses directes; une
    réponse qui vise un membre de cycle reste rattachée à sa chaîne.
    """
    if not replies:
        return []

    by_id = {reply.id: reply for reply in replies}
    targets = {
        reply.id: _find_target(reply, replies, by_id, parent_username)
        for reply in replies
    }

    cycles = _cycle_members(targets)

    def resolve_root(reply_id: int) -> int:
        current = reply_id
        while current not in cycles and targets[current] is not None:
            current = targets[current]
        return current

    roots = {reply.id: resolve_root(reply.id) for reply in replies}

    direct: List[ReplyRecord] = []
    buckets: Dict[int, List[ReplyRecord]] = {}
    for reply in replies:
        if roots[reply.id] == reply.id:
            direct.append(reply)
            buckets.setdefault(reply.id, [])
        else:
            buckets.setdefault(roots[reply.id], []).append(reply)

    # tri stable: à date égale, l'ordre reçu est conservé
    direct.sort(key=lambda r: r.created_at)

    organized: List[ThreadedReply] = []
    for root in direct:
        organized.append(_thread(root, is_direct=True, root_id=root.id))
        for child in sorted(buckets[root.id], key=lambda r: r.created_at):
            organized.append(_thread(child, is_direct=False, root_id=root.id))

    return organized


def _thread(reply: ReplyRecord, is_direct: bool, root_id: int) -> ThreadedReply:
    return ThreadedReply(
        **reply.model_dump(),
        is_direct_reply=is_direct,
        thread_root_id=root_id,
    )
