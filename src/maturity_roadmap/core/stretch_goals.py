"""Stretch considerations for categories that have already reached high maturity.

Each entry is a short bilingual list of "new horizon" suggestions shown in
place of ordinary recommendations once a category scores as high-performing.
"""

from dataclasses import dataclass

from maturity_roadmap.core.models import LocalisedText


@dataclass(frozen=True)
class StretchGoal:
    """Bilingual list of stretch suggestions for one category.

    Attributes:
        en: English suggestions.
        ja: Japanese suggestions.
    """

    en: tuple[str, ...]
    ja: tuple[str, ...]

    def for_language(self, language: str) -> list[str]:
        """Return the suggestions in a language, falling back to English."""
        return list(self.ja if language == "ja" else self.en)


TOP_OF_TRAIL_LABEL = LocalisedText(
    en="You're at the top of the trail!",
    ja="トレイルの頂点に到達しました！",
)

TOP_OF_TRAIL_DESCRIPTION = LocalisedText(
    en="No more core milestones—consider new horizons.",
    ja="これ以上のコアマイルストーンはありません - 新たな地平線を検討してください。",
)

CONSIDERATION_MAP: dict[str, StretchGoal] = {
    "foundations_culture": StretchGoal(
        en=(
            "Hosting a company-wide hack day",
            "Contributing back to CNCF projects",
            "Building your internal CCoE playbook",
        ),
        ja=(
            "社内全体のハックデーを開催する",
            "CNCFプロジェクトへの貢献",
            "社内クラウドセンターオブエクセレンスのプレイブックを構築",
        ),
    ),
    "business_value_strategy": StretchGoal(
        en=(
            "Developing advanced value stream metrics",
            "Creating industry-specific benchmarks",
            "Building an innovation investment framework",
        ),
        ja=(
            "高度なバリューストリームメトリクスの開発",
            "業界特有のベンチマーク作成",
            "イノベーション投資フレームワークの構築",
        ),
    ),
    "application_architecture": StretchGoal(
        en=(
            "Implement service mesh for advanced traffic management",
            "Create a framework for measuring architectural quality",
            "Establish a microservices maturity model",
        ),
        ja=(
            "高度なトラフィック管理のためのサービスメッシュの実装",
            "アーキテクチャ品質測定のためのフレームワーク作成",
            "マイクロサービス成熟度モデルの確立",
        ),
    ),
    "app_migration_modernization": StretchGoal(
        en=(
            "Creating a custom cloud-native pattern library",
            "Building a modernization factory process",
            "Developing automated migration assessment tools",
        ),
        ja=(
            "カスタムクラウドネイティブパターンライブラリの作成",
            "モダナイゼーションファクトリープロセスの構築",
            "自動化された移行評価ツールの開発",
        ),
    ),
    "container_infrastructure": StretchGoal(
        en=(
            "Building custom Kubernetes operators",
            "Implementing advanced multi-cluster federation",
            "Creating custom schedulers for specialized workloads",
        ),
        ja=(
            "カスタムKubernetesオペレーターの構築",
            "高度なマルチクラスターフェデレーションの実装",
            "特殊なワークロード向けのカスタムスケジューラの作成",
        ),
    ),
    "cicd_practices": StretchGoal(
        en=(
            "Implementing progressive delivery practices",
            "Building AI-assisted testing strategies and automated quality gates",
            "Creating custom CI/CD metrics dashboards",
        ),
        ja=(
            "プログレッシブデリバリープラクティスの実装",
            "AI支援のテスト戦略と自動品質ゲートの構築",
            "カスタムCI/CDメトリクスダッシュボードの作成",
        ),
    ),
    "dora_metrics": StretchGoal(
        en=(
            "Creating team-specific DORA metric goals",
            "Building correlation models with business outcomes",
            "Implementing SPACE framework metrics alongside DORA",
        ),
        ja=(
            "チーム固有のDORAメトリック目標の設定",
            "ビジネス成果との相関モデルの構築",
            "DORAメトリクスと併せてSPACEフレームワークメトリクスの導入",
        ),
    ),
    "security_compliance": StretchGoal(
        en=(
            "Building a secure-by-design patterns library",
            "Implementing GitOps for security policy management",
            "Creating integrated threat modeling processes",
        ),
        ja=(
            "セキュア・バイ・デザインパターンライブラリの構築",
            "セキュリティポリシー管理のためのGitOpsの実装",
            "統合された脅威モデリングプロセスの作成",
        ),
    ),
    "infrastructure_platform": StretchGoal(
        en=(
            "Creating a site reliability engineering playbook",
            "Building a self-service developer portal with automated resource provisioning",
            "Implementing infrastructure as code generators",
        ),
        ja=(
            "サイト信頼性エンジニアリングプレイブックの作成",
            "自動リソースプロビジョニングを備えたセルフサービス開発者ポータルの構築",
            "インフラストラクチャアズコードジェネレータの実装",
        ),
    ),
    "data_management": StretchGoal(
        en=(
            "Implementing a data mesh architecture",
            "Building real-time data streaming pipelines",
            "Creating data quality governance frameworks",
        ),
        ja=(
            "データメッシュアーキテクチャの実装",
            "リアルタイムデータストリーミングパイプラインの構築",
            "データ品質ガバナンスフレームワークの作成",
        ),
    ),
    "observability": StretchGoal(
        en=(
            "Building business-aligned observability metrics",
            "Creating custom SLO/SLI frameworks",
            "Implementing AIOps for anomaly detection",
        ),
        ja=(
            "ビジネスに連携した可観測性メトリクスの構築",
            "カスタムSLO/SLIフレームワークの作成",
            "異常検知のためのAIOpsの実装",
        ),
    ),
    "finops_cost_management": StretchGoal(
        en=(
            "Building predictive cost optimization models",
            "Creating customized FinOps reporting by business unit",
            "Implementing real-time spending controls",
        ),
        ja=(
            "予測コスト最適化モデルの構築",
            "事業部門別のカスタマイズされたFinOpsレポートの作成",
            "リアルタイム支出管理の実装",
        ),
    ),
    "operations_resilience": StretchGoal(
        en=(
            "Creating chaos engineering frameworks",
            "Building resilience modeling simulations",
            "Implementing platform-level failover automation",
        ),
        ja=(
            "カオスエンジニアリングフレームワークの作成",
            "レジリエンスモデリングシミュレーションの構築",
            "プラットフォームレベルのフェイルオーバー自動化の実装",
        ),
    ),
    "multicloud_hybrid_governance": StretchGoal(
        en=(
            "Implementing dynamic workload placement optimization",
            "Building cross-cloud service catalogs",
            "Implementing cloud-agnostic policy frameworks",
        ),
        ja=(
            "動的ワークロード配置の最適化の実装",
            "クロスクラウドサービスカタログの構築",
            "クラウドに依存しないポリシーフレームワークの実装",
        ),
    ),
    "ai_ml_integration": StretchGoal(
        en=(
            "Building MLOps deployment pipelines",
            "Creating model governance frameworks",
            "Implementing federated learning systems",
        ),
        ja=(
            "MLOpsデプロイメントパイプラインの構築",
            "モデルガバナンスフレームワークの作成",
            "連合学習システムの実装",
        ),
    ),
}
