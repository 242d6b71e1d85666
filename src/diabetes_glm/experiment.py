"""
Main experiment script for the diabetes logistic regression analysis

This script runs the whole analysis as a single workflow:
1. Data exploration and loading
2. Data cleaning (complete cases) and quality report
3. Descriptive statistics by outcome
4. Stratified train/test split
5. Logistic regression fit (binomial GLM, logit link)
6. Test-set predictions and classification metrics
7. Plots (ROC curve, confusion matrix, odds ratios, predictor distributions)

Usage:
    python -m diabetes_glm.experiment data/PimaIndiansDiabetes2.csv
"""

import argparse
import os
import sys
from datetime import datetime

from .analyzer import StatisticalAnalyzer
from .config import DEFAULT_DATA_PATH, RESULTS_DIR, AnalysisConfig
from .data_cleaner import DataCleaner
from .data_loader import DataLoader
from .evaluator import ClassificationEvaluator
from .exceptions import PipelineError
from .pipeline import run_pipeline
from .splitter import DataSplitter
from .visualizer import Visualizer


class Tee:
    """Helper class to redirect output to both console and file"""
    def __init__(self, *files):
        self.files = files
    def write(self, obj):
        for f in self.files:
            f.write(obj)
            f.flush()
    def flush(self):
        for f in self.files:
            f.flush()


def banner(title):
    print("\n" + "="*50)
    print(title)
    print("="*50)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Logistic regression analysis of diabetes data")
    parser.add_argument('data_path', nargs='?', default=DEFAULT_DATA_PATH,
                        help=f"CSV or Excel file with the nine Pima columns (default: {DEFAULT_DATA_PATH})")
    return parser.parse_args(argv)


def run_experiment(data_path, results_dir=RESULTS_DIR, config=None):
    """Run every step, printing as it goes, and write outputs to results_dir"""
    if config is None:
        config = AnalysisConfig()
    os.makedirs(results_dir, exist_ok=True)

    # =====================================
    # STEP 1: DATA EXPLORATION & LOADING
    # =====================================
    banner("STEP 1: DATA EXPLORATION & LOADING")
    loader = DataLoader(data_path)
    loader.explore_structure()
    df_raw = loader.load()

    print("\n" + DataCleaner(config.reference_level).generate_quality_report(df_raw))

    # =====================================
    # STEP 2-5: CLEAN, SPLIT, FIT, PREDICT, EVALUATE
    # =====================================
    banner("STEP 2: CLEANING, SPLITTING, FITTING")
    outputs = run_pipeline(df_raw, config)

    df_clean = outputs['clean']
    df_clean.to_csv(f"{results_dir}/processed_data.csv", index=False)

    print("\nOutcome proportions (full / train / test):")
    for name in ('clean', 'train', 'test'):
        proportions = DataSplitter.class_proportions(outputs[name])
        print(f"  {name:<6}" + ", ".join(f"{label}={share:.3f}" for label, share in proportions.items()))

    # =====================================
    # STEP 3: DESCRIPTIVE STATISTICS
    # =====================================
    banner("STEP 3: DESCRIPTIVE STATISTICS")
    stat_analyzer = StatisticalAnalyzer(df_clean)
    stat_analyzer.predictor_summary()
    group_comparison = stat_analyzer.compare_groups()
    group_comparison.to_csv(f"{results_dir}/group_comparison.csv", index=False)

    # =====================================
    # STEP 4: MODEL COEFFICIENTS
    # =====================================
    banner("STEP 4: MODEL COEFFICIENTS")
    model = outputs['model']
    print(f"Reference level: '{model.reference_label}' "
          f"(coefficients are log-odds of '{model.event_label}')")
    print("\nCoefficients (log-odds):")
    print(outputs['coefficients'].round(4).to_string(index=False))
    if config.exponentiate:
        print("\nOdds ratios:")
        print(outputs['odds_ratios'].round(4).to_string(index=False))
    print("\nModel fit statistics:")
    print(outputs['model_statistics'].to_string())

    outputs['coefficients'].to_csv(f"{results_dir}/coefficients.csv", index=False)
    outputs['odds_ratios'].to_csv(f"{results_dir}/odds_ratios.csv", index=False)

    # =====================================
    # STEP 5: EVALUATION
    # =====================================
    banner("STEP 5: TEST SET EVALUATION")
    results = outputs['results']
    print("First 10 predictions:")
    print(results.head(10).round(4))
    print("\n" + ClassificationEvaluator(results).report())

    results.to_csv(f"{results_dir}/test_predictions.csv")
    outputs['metrics'].to_csv(f"{results_dir}/metrics.csv", index=False)
    outputs['roc_curve'].to_frame().to_csv(f"{results_dir}/roc_curve.csv", index=False)

    # =====================================
    # STEP 6: VISUALIZATIONS
    # =====================================
    banner("STEP 6: VISUALIZATIONS")
    visualizer = Visualizer(config.plot_style)
    visualizer.plot_roc_curve(outputs['roc_curve'], outputs['roc_auc'], results_dir)
    visualizer.plot_confusion_matrix(outputs['confusion_matrix'], results_dir)
    visualizer.plot_odds_ratios(outputs['odds_ratios'], results_dir)
    visualizer.plot_predictor_distributions(df_clean, results_dir)

    return outputs


def main(argv=None):
    """Main experiment workflow"""
    args = parse_args(argv)

    print("="*60)
    print("DIABETES LOGISTIC REGRESSION EXPERIMENT")
    print("="*60)
    print(f"Started at: {datetime.now()}")

    results_dir = RESULTS_DIR
    os.makedirs(results_dir, exist_ok=True)
    log_file = f"{results_dir}/experiment_log.txt"

    with open(log_file, "w", encoding='utf-8') as f:
        original_stdout = sys.stdout
        sys.stdout = Tee(sys.stdout, f)
        try:
            run_experiment(args.data_path, results_dir)
        except PipelineError as exc:
            print(f"\nExperiment failed: {exc}")
            return 1
        finally:
            sys.stdout = original_stdout

    print(f"\nExperiment completed successfully!")
    print(f"Results saved to: {results_dir}/")
    print(f"Log file: {log_file}")
    print(f"Completed at: {datetime.now()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
