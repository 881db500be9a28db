"""
subspace_core.constants
-----------------------
Kind numbers, operation names and tag vocabulary shared by every module.

Each module owns a disjoint hundred-block of kinds. The registry is the union
of every module's {kind: operation} declarations; these constants are the
single place the numbers are written down.
"""

# --- Subspace lifecycle ---
KIND_SUBSPACE_CREATE = 30100
KIND_SUBSPACE_JOIN = 30200

# --- Governance (cip01) ---
KIND_GOVERNANCE_POST = 30300
KIND_GOVERNANCE_PROPOSE = 30301
KIND_GOVERNANCE_VOTE = 30302
KIND_GOVERNANCE_INVITE = 30303
KIND_GOVERNANCE_MINT = 30304

# --- Common graph (cip02) ---
KIND_COMMON_GRAPH_PROJECT = 30101
KIND_COMMON_GRAPH_TASK = 30102
KIND_COMMON_GRAPH_ENTITY = 30103
KIND_COMMON_GRAPH_RELATION = 30104
KIND_COMMON_GRAPH_OBSERVATION = 30105

# --- Model graph (cip03) ---
KIND_MODEL_GRAPH_MODEL = 30404
KIND_MODEL_GRAPH_DATASET = 30405
KIND_MODEL_GRAPH_COMPUTE = 30406
KIND_MODEL_GRAPH_ALGO = 30407
KIND_MODEL_GRAPH_VALID = 30408
KIND_MODEL_GRAPH_FINETUNE = 30409
KIND_MODEL_GRAPH_CONVERSATION = 30410
KIND_MODEL_GRAPH_SESSION = 30411

# --- Open research (cip05) ---
KIND_OPEN_RESEARCH_PAPER = 30501
KIND_OPEN_RESEARCH_ANNOTATION = 30502
KIND_OPEN_RESEARCH_REVIEW = 30503
KIND_OPEN_RESEARCH_AI_ANALYSIS = 30504
KIND_OPEN_RESEARCH_DISCUSSION = 30505
KIND_OPEN_RESEARCH_READ_PAPER = 30506
KIND_OPEN_RESEARCH_CO_CREATE = 30507

# --- Social (cip06) ---
KIND_SOCIAL_LIKE = 30600
KIND_SOCIAL_COLLECT = 30601
KIND_SOCIAL_SHARE = 30602
KIND_SOCIAL_COMMENT = 30603
KIND_SOCIAL_TAG = 30604
KIND_SOCIAL_FOLLOW = 30605
KIND_SOCIAL_UNFOLLOW = 30606
KIND_SOCIAL_QUESTION = 30607
KIND_SOCIAL_ROOM = 30608
KIND_SOCIAL_MESSAGE = 30609

# --- Community (cip07) ---
KIND_COMMUNITY_CREATE = 30700
KIND_COMMUNITY_INVITE = 30701
KIND_COMMUNITY_CHANNEL_CREATE = 30702
KIND_COMMUNITY_CHANNEL_MESSAGE = 30703


# Operation names
OP_SUBSPACE_CREATE = "subspace_create"
OP_SUBSPACE_JOIN = "subspace_join"

OP_POST = "post"
OP_PROPOSE = "propose"
OP_VOTE = "vote"
OP_INVITE = "invite"
OP_MINT = "mint"

OP_PROJECT = "project"
OP_TASK = "task"
OP_ENTITY = "entity"
OP_RELATION = "relation"
OP_OBSERVATION = "observation"

OP_MODEL = "model"
OP_DATASET = "dataset"
OP_COMPUTE = "compute"
OP_ALGO = "algo"
OP_VALID = "valid"
OP_FINETUNE = "finetune"
OP_CONVERSATION = "conversation"
OP_SESSION = "session"

OP_PAPER = "paper"
OP_ANNOTATION = "annotation"
OP_REVIEW = "review"
OP_AI_ANALYSIS = "ai_analysis"
OP_DISCUSSION = "discussion"
OP_READ_PAPER = "read_paper"
OP_CO_CREATE_PAPER = "co_create_paper"

OP_LIKE = "like"
OP_COLLECT = "collect"
OP_SHARE = "share"
OP_COMMENT = "comment"
OP_TAG = "tag"
OP_FOLLOW = "follow"
OP_UNFOLLOW = "unfollow"
OP_QUESTION = "question"
OP_ROOM = "room"
OP_MESSAGE = "message"

OP_COMMUNITY_CREATE = "community_create"
OP_COMMUNITY_INVITE = "community_invite"
OP_CHANNEL_CREATE = "channel_create"
OP_CHANNEL_MESSAGE = "channel_message"


# Default ops strings declared by subspaces at creation time
COMMON_PROJECT_OPS = "project=30101,task=30102"
COMMON_GRAPH_OPS = "entity=30103,relation=30104,observation=30105"
DEFAULT_SUBSPACE_OPS = "post=30300,propose=30301,vote=30302,invite=30303,mint=30304"
MODEL_GRAPH_SUBSPACE_OPS = "dataset=30405,finetune=30409,conversation=30410,session=30411"
OPEN_RESEARCH_SUBSPACE_OPS = (
    "paper=30501,annotation=30502,review=30503,ai_analysis=30504,"
    "discussion=30505,read_paper=30506,co_create_paper=30507"
)
SOCIAL_SUBSPACE_OPS = (
    "like=30600,collect=30601,share=30602,comment=30603,tag=30604,"
    "follow=30605,unfollow=30606,question=30607,room=30608,message=30609"
)
COMMUNITY_SUBSPACE_OPS = (
    "community_create=30700,community_invite=30701,"
    "channel_create=30702,channel_message=30703"
)


# Tag vocabulary read by the common extraction pass
TAG_SUBSPACE_ID = "sid"
TAG_AUTH = "auth"
TAG_PARENT = "parent"
TAG_MARKER = "d"
TAG_OPERATION = "op"

SUBSPACE_OP_MARKER = "subspace_op"
