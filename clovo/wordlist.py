"""Built-in word list for passphrase generation: short, distinct, easy-to-type words."""

WORDS = (
    "acorn", "admiral", "aerial", "alpine", "amber", "anchor", "antler", "apricot",
    "arcade", "arrow", "aspen", "atlas", "autumn", "avenue", "badge", "bagel",
    "balcony", "bamboo", "banjo", "barley", "basil", "beacon", "beetle", "bellow",
    "birch", "biscuit", "blanket", "blossom", "bonfire", "boulder", "bramble", "breeze",
    "bridge", "bronze", "bucket", "buffalo", "button", "cabin", "cactus", "camera",
    "candle", "canyon", "captain", "caramel", "carbon", "cargo", "castle", "cedar",
    "cellar", "chapel", "cherry", "chimney", "cinder", "citrus", "clover", "cobalt",
    "coconut", "comet", "copper", "coral", "cosmos", "cotton", "cougar", "crater",
    "crayon", "cricket", "crystal", "cupboard", "cyclone", "dagger", "daisy", "delta",
    "denim", "desert", "diesel", "dolphin", "domino", "donkey", "dragonfly", "drizzle",
    "dune", "eagle", "easel", "eclipse", "ember", "emerald", "engine", "falcon",
    "feather", "fennel", "ferry", "fiddle", "fjord", "flannel", "flint", "forest",
    "fossil", "fountain", "freckle", "fringe", "galaxy", "garnet", "gazelle", "geyser",
    "ginger", "glacier", "goblet", "granite", "gravel", "griffin", "guitar", "hammock",
    "harbor", "harvest", "hazel", "hedgehog", "helmet", "heron", "hickory", "honey",
    "horizon", "husky", "iceberg", "igloo", "indigo", "island", "ivory", "jacket",
    "jaguar", "jasmine", "jigsaw", "journal", "juniper", "kayak", "kernel", "kettle",
    "kiwi", "lagoon", "lantern", "lava", "lemon", "lentil", "lichen", "lilac",
    "linen", "lizard", "lobster", "locket", "lumber", "magnet", "mango", "maple",
    "marble", "meadow", "meteor", "mitten", "mosaic", "mustard", "nectar", "nickel",
    "nutmeg", "oasis", "octopus", "olive", "onyx", "orbit", "orchid", "otter",
    "paddle", "pancake", "panther", "papaya", "parrot", "pebble", "pepper", "pigeon",
    "pillow", "pine", "planet", "plume", "pocket", "pollen", "poppy", "prairie",
    "pretzel", "pumpkin", "quartz", "quill", "rabbit", "raccoon", "radar", "raven",
    "reef", "ribbon", "ripple", "rocket", "saddle", "saffron", "salmon", "sandal",
    "sapphire", "satchel", "scarlet", "sequoia", "shovel", "silver", "sketch", "sparrow",
    "spruce", "squirrel", "stable", "stencil", "summit", "swallow", "tablet", "tangle",
    "teapot", "thistle", "thunder", "timber", "toucan", "tractor", "trellis", "tulip",
    "tundra", "turnip", "umber", "valley", "velvet", "violet", "voyage", "waffle",
    "walnut", "walrus", "willow", "window", "wizard", "yarrow", "zephyr", "zinnia",
)
