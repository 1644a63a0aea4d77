# python
import logging
import sys

from cmdflags import FlagCleanup, define_bool, define_string, parse_command_line_flags

logger = logging.getLogger("normalize_main")

MODEL = define_string("model", "", "Model file name")
USE_INTERNAL_NORMALIZATION = define_bool(
    "use_internal_normalization",
    False,
    'Use NormalizerSpec "as-is" to run the normalizer for SentencePiece segmentation',
)
NORMALIZATION_RULE_NAME = define_string(
    "normalization_rule_name", "", "Normalization rule name. Choose from nfkc or identity"
)
NORMALIZATION_RULE_TSV = define_string("normalization_rule_tsv", "", "Normalization rule TSV file. ")
REMOVE_EXTRA_WHITESPACES = define_bool("remove_extra_whitespaces", True, "Remove extra whitespaces")
DECOMPILE = define_bool("decompile", False, "Decompile compiled charamap and output it as TSV.")
INPUT = define_string("input", "", "Input filename")
OUTPUT = define_string("output", "", "Output filename")


def main(argv=None) -> int:
    with FlagCleanup() as cleanup:
        args = parse_command_line_flags(argv, cleanup=cleanup)
        rest_args = [INPUT.value] if INPUT.value else args[1:]

        if MODEL.value:
            source = {"model": MODEL.value}
        elif NORMALIZATION_RULE_TSV.value:
            source = {"normalization_rule_tsv": NORMALIZATION_RULE_TSV.value}
        elif NORMALIZATION_RULE_NAME.value:
            source = {"normalization_rule_name": NORMALIZATION_RULE_NAME.value}
        else:
            logger.critical("Sets --model, normalization_rule_tsv, or normalization_rule_name flag.")
            return 1

        if not USE_INTERNAL_NORMALIZATION.value:
            source["remove_extra_whitespaces"] = REMOVE_EXTRA_WHITESPACES.value

        print("Normalizer source:", source)
        print("Mode:", "decompile" if DECOMPILE.value else "normalize")
        print("Inputs:", rest_args or ["<stdin>"])
        print("Output:", OUTPUT.value or "<stdout>")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
