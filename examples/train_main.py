# python
import logging
import sys

from cmdflags import (
    FlagCleanup,
    define_bool,
    define_double,
    define_float,
    define_int32,
    define_string,
    define_uint32,
    define_uint64,
    parse_command_line_flags,
)

logger = logging.getLogger("train_main")

INPUT = define_string("input", "", "comma separated list of input sentences")
INPUT_FORMAT = define_string("input_format", "", "Input format. Supported format is `text` or `tsv`.")
MODEL_PREFIX = define_string("model_prefix", "", "output model prefix")
MODEL_TYPE = define_string("model_type", "unigram", "model algorithm: unigram, bpe, word or char")
VOCAB_SIZE = define_int32("vocab_size", 8000, "vocabulary size")
CHARACTER_COVERAGE = define_double(
    "character_coverage", 0.9995, "character coverage to determine the minimum symbols"
)
INPUT_SENTENCE_SIZE = define_uint64(
    "input_sentence_size", 0, "maximum size of sentences the trainer loads"
)
SHUFFLE_INPUT_SENTENCE = define_bool(
    "shuffle_input_sentence",
    True,
    "Randomly sample input sentences in advance. Valid when --input_sentence_size > 0",
)
NUM_THREADS = define_int32("num_threads", 16, "number of threads for training")
CONTROL_SYMBOLS = define_string("control_symbols", "", "comma separated list of control symbols")
USER_DEFINED_SYMBOLS = define_string(
    "user_defined_symbols", "", "comma separated list of user defined symbols"
)
BYTE_FALLBACK = define_bool("byte_fallback", False, "decompose unknown pieces into UTF-8 byte pieces")
UNK_ID = define_int32("unk_id", 0, "Override UNK (<unk>) id.")
BOS_ID = define_int32("bos_id", 1, "Override BOS (<s>) id. Set -1 to disable BOS.")
EOS_ID = define_int32("eos_id", 2, "Override EOS (</s>) id. Set -1 to disable EOS.")
PAD_ID = define_int32("pad_id", -1, "Override PAD (<pad>) id. Set -1 to disable PAD.")
RANDOM_SEED = define_uint32("random_seed", 4294967295, "Seed value for random generator.")
ENABLE_DIFFERENTIAL_PRIVACY = define_bool(
    "enable_differential_privacy",
    False,
    "Whether to add DP while training. Currently supported only by UNIGRAM model.",
)
DIFFERENTIAL_PRIVACY_NOISE_LEVEL = define_float(
    "differential_privacy_noise_level", 0.0, "Amount of noise to add for DP"
)
DIFFERENTIAL_PRIVACY_CLIPPING_THRESHOLD = define_uint64(
    "differential_privacy_clipping_threshold", 0, "Threshold for clipping the counts for DP"
)


def _csv(value: str) -> list:
    return [v for v in value.split(",") if v]


def main(argv=None) -> int:
    with FlagCleanup() as cleanup:
        parse_command_line_flags(argv, cleanup=cleanup)

        if not INPUT.value or not MODEL_PREFIX.value:
            logger.critical("--input and --model_prefix are required.")
            return 1

        trainer_spec = {
            "input": _csv(INPUT.value),
            "input_format": INPUT_FORMAT.value,
            "model_prefix": MODEL_PREFIX.value,
            "model_type": MODEL_TYPE.value,
            "vocab_size": VOCAB_SIZE.value,
            "character_coverage": CHARACTER_COVERAGE.value,
            "input_sentence_size": INPUT_SENTENCE_SIZE.value,
            "shuffle_input_sentence": SHUFFLE_INPUT_SENTENCE.value,
            "num_threads": NUM_THREADS.value,
            "control_symbols": _csv(CONTROL_SYMBOLS.value),
            "user_defined_symbols": _csv(USER_DEFINED_SYMBOLS.value),
            "byte_fallback": BYTE_FALLBACK.value,
            "unk_id": UNK_ID.value,
            "bos_id": BOS_ID.value,
            "eos_id": EOS_ID.value,
            "pad_id": PAD_ID.value,
            "enable_differential_privacy": ENABLE_DIFFERENTIAL_PRIVACY.value,
            "differential_privacy_noise_level": DIFFERENTIAL_PRIVACY_NOISE_LEVEL.value,
            "differential_privacy_clipping_threshold": DIFFERENTIAL_PRIVACY_CLIPPING_THRESHOLD.value,
        }
        if RANDOM_SEED.value != RANDOM_SEED.default:
            trainer_spec["random_seed"] = RANDOM_SEED.value

        for key, value in trainer_spec.items():
            print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
