#!/usr/bin/env python
# coding: utf-8

import json
import argparse
import numpy as np
from tqdm import tqdm
from typing import List

from studykit.config import settings
from studykit.models import Flashcard, AnswerDifficulty
from studykit.schemas import DeckSchema, ProgressSchema
from studykit.leitner import LeitnerScheduler
from studykit.util import get_logger


logger = get_logger('studykit.simulation')

DIFFICULTIES = [AnswerDifficulty.WRONG, AnswerDifficulty.HARD, AnswerDifficulty.EASY]


def get_result(bucket: int, rng: np.random.Generator) -> AnswerDifficulty:
    '''the core of simulated user that picks an answer for a card in `bucket`'''
    # the higher the bucket the more likely the card is known
    p_easy = 1 - np.exp2(-(bucket + 1))
    p_wrong = (1 - p_easy) / 2
    p_hard = 1 - p_easy - p_wrong
    index = rng.choice(len(DIFFICULTIES), p=[p_wrong, p_hard, p_easy])
    return DIFFICULTIES[index]


def simulate(cards: List[Flashcard], n_days: int, seed: int = 0) -> LeitnerScheduler:
    '''
    Study `cards` for `n_days` days.
    Every day the due cards are reviewed once by the simulated user.
    '''
    rng = np.random.default_rng(seed)
    order = {id(card): i for i, card in enumerate(cards)}
    scheduler = LeitnerScheduler()
    for card in cards:
        scheduler.add_card(card)

    for day in tqdm(range(n_days), disable=n_days < 2):
        # fix the review order so the seed fully determines the run
        due = sorted(scheduler.cards_due(day), key=lambda card: order[id(card)])
        for card in due:
            result = get_result(scheduler.bucket_of(card), rng)
            scheduler.record(card, result, day)
        logger.info('day {}: reviewed {} cards'.format(day, len(due)))

    return scheduler


def load_deck(path: str) -> DeckSchema:
    with open(path) as f:
        return DeckSchema(**json.load(f))


def main():
    parser = argparse.ArgumentParser(description='Simulate Leitner study sessions')
    parser.add_argument('--deck', type=str, required=True,
                        help='JSON file with a deck name and a list of cards')
    parser.add_argument('--days', type=int, default=settings.SIMULATION_DAYS,
                        help='number of days to simulate')
    parser.add_argument('--seed', type=int, default=settings.SIMULATION_SEED,
                        help='random seed of the simulated user')
    args = parser.parse_args()

    deck = load_deck(args.deck)
    logger.info('loaded deck {} with {} cards'.format(deck.name, len(deck.cards)))
    cards = [c.to_flashcard() for c in deck.cards]
    progress: ProgressSchema = simulate(cards, args.days, args.seed).progress()
    print(json.dumps(progress.model_dump(), indent=2))


if __name__ == '__main__':
    main()
